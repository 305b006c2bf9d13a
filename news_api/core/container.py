from dataclasses import dataclass

from sqlalchemy.orm import sessionmaker

from ..config import Settings
from ..repositories.news_repository import NewsRepository
from ..services.news_service import NewsService
from ..services.notification_queue import NotificationQueue
from ..services.notification_sender import NotificationSender
from .cache import TTLCache


@dataclass
class ServiceContainer:
    session_factory: sessionmaker
    cache: TTLCache
    queue: NotificationQueue
    news_service: NewsService


def build_container(settings: Settings, session_factory: sessionmaker) -> ServiceContainer:
    cache = TTLCache(
        ttl_seconds=settings.cache_ttl_seconds,
        max_entries=settings.cache_max_entries,
    )
    sender = NotificationSender(
        webhook_url=settings.notification_webhook_url,
        timeout_seconds=settings.notification_timeout_seconds,
        simulated_latency_seconds=settings.notification_latency_seconds,
    )
    queue = NotificationQueue(
        sender=sender,
        job_delay_seconds=settings.queue_job_delay_seconds,
        history_size=settings.queue_history_size,
    )
    news_service = NewsService(
        repository=NewsRepository(session_factory),
        cache=cache,
        queue=queue,
    )
    return ServiceContainer(
        session_factory=session_factory,
        cache=cache,
        queue=queue,
        news_service=news_service,
    )
