from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from ..config import get_settings

Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False}
        )
    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=300,
        echo=echo
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    # Rows handed back by the repository outlive their session
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


settings = get_settings()

engine = build_engine(settings.database_url, echo=settings.debug)
SessionLocal = build_session_factory(engine)


def create_tables(bind: Optional[Engine] = None):
    # Import models to register them with Base
    from ..models import news  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Optional[Engine] = None):
    Base.metadata.drop_all(bind=bind or engine)
