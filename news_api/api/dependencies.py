from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from ..core.cache import TTLCache
from ..core.container import ServiceContainer
from ..services.news_service import NewsService
from ..services.notification_queue import NotificationQueue


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_news_service(request: Request) -> NewsService:
    return get_container(request).news_service


def get_notification_queue(request: Request) -> NotificationQueue:
    return get_container(request).queue


def get_list_cache(request: Request) -> TTLCache:
    return get_container(request).cache


def get_db(request: Request) -> Generator[Session, None, None]:
    db = get_container(request).session_factory()
    try:
        yield db
    finally:
        db.close()
