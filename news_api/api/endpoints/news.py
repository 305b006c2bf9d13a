from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from ...schemas.news import (
    MAX_PAGE,
    MAX_PAGE_SIZE,
    NewsCreateRequest,
    NewsUpdateRequest,
    NewsResponse,
    PaginatedNewsResponse,
)
from ...services.news_service import NewsService
from ..dependencies import get_news_service

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=NewsResponse, status_code=status.HTTP_201_CREATED)
async def create_news(
    request: NewsCreateRequest,
    news_service: NewsService = Depends(get_news_service)
):
    return await news_service.create_news(request.title, request.description)


@router.get("", response_model=PaginatedNewsResponse)
async def list_news(
    page: int = Query(1, ge=1, le=MAX_PAGE, description="Page number, starting at 1"),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE, description="Items per page (max 100)"),
    titulo: Optional[str] = Query(None, description="Substring filter on the title"),
    descricao: Optional[str] = Query(None, description="Substring filter on the description"),
    news_service: NewsService = Depends(get_news_service)
):
    """List news items, newest first"""
    return await news_service.list_news(page=page, limit=limit, titulo=titulo, descricao=descricao)


@router.get("/{news_id}", response_model=NewsResponse)
async def get_news(
    news_id: str,
    news_service: NewsService = Depends(get_news_service)
):
    return await news_service.get_news(news_id)


@router.patch("/{news_id}", response_model=NewsResponse)
async def update_news(
    news_id: str,
    request: NewsUpdateRequest,
    news_service: NewsService = Depends(get_news_service)
):
    """Apply only the fields present in the body"""
    return await news_service.update_news(news_id, request.model_dump(exclude_unset=True))


@router.delete("/{news_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_news(
    news_id: str,
    news_service: NewsService = Depends(get_news_service)
):
    await news_service.delete_news(news_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
