import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from news_api.config import Settings
from news_api.core.cache import TTLCache
from news_api.core.database import build_session_factory, create_tables, drop_tables
from news_api.repositories.news_repository import NewsRepository
from news_api.services.news_service import NewsService


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        cache_ttl_seconds=300,
        cache_max_entries=100,
        queue_job_delay_seconds=0,
        notification_latency_seconds=0,
        notification_webhook_url=None,
        log_format="text",
    )


@pytest.fixture
def test_engine():
    # Use in-memory SQLite for tests, shared across sessions
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    try:
        yield engine
    finally:
        drop_tables(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return build_session_factory(test_engine)


@pytest.fixture
def news_repository(session_factory):
    return NewsRepository(session_factory)


@pytest.fixture
def list_cache():
    return TTLCache(ttl_seconds=300, max_entries=100)


@pytest.fixture
def mock_queue():
    queue = MagicMock()
    queue.enqueue = MagicMock()
    return queue


@pytest.fixture
def news_service(news_repository, list_cache, mock_queue):
    return NewsService(repository=news_repository, cache=list_cache, queue=mock_queue)


@pytest.fixture
async def test_app(test_settings, session_factory):
    from news_api.main import create_application

    app = create_application(settings=test_settings, session_factory=session_factory)
    try:
        yield app
    finally:
        await app.state.container.queue.close()


@pytest.fixture
async def async_client(test_app):
    from httpx import AsyncClient, ASGITransport

    # Use ASGITransport for direct app interaction
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def news_payload():
    return {
        "title": "Nova Tecnologia Revoluciona o Mercado",
        "description": "Uma nova tecnologia promete transformar a forma como trabalhamos.",
    }
