import json
import math
from typing import Any, Dict, Optional

import structlog

from ..core.cache import TTLCache
from ..exceptions import NewsNotFoundError
from ..models.news import News
from ..repositories.news_repository import NewsRepository
from ..schemas.news import NewsResponse, PaginatedNewsResponse, PaginationMeta
from .notification_queue import NotificationQueue

logger = structlog.get_logger(__name__)

LIST_CACHE_PREFIX = "noticias"


def build_list_cache_key(page: int, limit: int, titulo: Optional[str], descricao: Optional[str]) -> str:
    # An empty filter and a missing one share a key; neither restricts the query.
    # JSON encoding keeps separators inside filter values from merging two keys.
    return f"{LIST_CACHE_PREFIX}:" + json.dumps([page, limit, titulo or "", descricao or ""], ensure_ascii=False)


class NewsService:
    def __init__(self, repository: NewsRepository, cache: TTLCache, queue: NotificationQueue):
        self.repository = repository
        self.cache = cache
        self.queue = queue

    async def create_news(self, title: str, description: str) -> News:
        news = self.repository.create(title=title, description=description)
        logger.info("news_created", news_id=news.id)

        self._invalidate_list_cache()

        try:
            self.queue.enqueue({
                "type": "news_created",
                "newsId": news.id,
                "title": news.title,
            })
        except Exception as e:
            logger.error("notification_enqueue_failed", news_id=news.id, error=str(e))

        return news

    async def list_news(
        self,
        page: int = 1,
        limit: int = 10,
        titulo: Optional[str] = None,
        descricao: Optional[str] = None,
    ) -> PaginatedNewsResponse:
        cache_key = build_list_cache_key(page, limit, titulo, descricao)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("news_list_cache_hit", cache_key=cache_key)
            return cached

        items, total = self.repository.list_paginated(
            offset=(page - 1) * limit,
            limit=limit,
            title=titulo,
            description=descricao,
        )

        result = PaginatedNewsResponse(
            data=[NewsResponse.model_validate(item) for item in items],
            meta=PaginationMeta(
                total=total,
                page=page,
                limit=limit,
                total_pages=math.ceil(total / limit),
            ),
        )

        self.cache.set(cache_key, result)
        logger.debug("news_list_cached", cache_key=cache_key, total=total)

        return result

    async def get_news(self, news_id: str) -> News:
        news = self.repository.get_by_id(news_id)
        if not news:
            raise NewsNotFoundError(news_id)
        return news

    async def update_news(self, news_id: str, fields: Dict[str, Any]) -> News:
        news = self.repository.update(news_id, fields)
        if not news:
            raise NewsNotFoundError(news_id)
        logger.info("news_updated", news_id=news_id, fields=sorted(fields))

        self._invalidate_list_cache()
        return news

    async def delete_news(self, news_id: str) -> None:
        if not self.repository.delete(news_id):
            raise NewsNotFoundError(news_id)
        logger.info("news_deleted", news_id=news_id)

        self._invalidate_list_cache()

    def _invalidate_list_cache(self) -> None:
        # Filter-keyed pages are not tracked individually, so the whole cache goes.
        try:
            self.cache.reset()
            logger.info("news_list_cache_invalidated")
        except Exception as e:
            logger.error("news_list_cache_invalidation_failed", error=str(e))
