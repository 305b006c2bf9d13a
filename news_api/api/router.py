from fastapi import APIRouter

from .endpoints import news, queue

api_router = APIRouter()

api_router.include_router(news.router, prefix="/noticias", tags=["noticias"])
api_router.include_router(queue.router, prefix="/queue", tags=["queue"])
