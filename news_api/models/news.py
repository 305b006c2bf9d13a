import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, Index
from sqlalchemy.sql import func

from ..core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class News(Base):
    __tablename__ = "noticias"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    created_at = Column(DateTime, nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, default=utcnow, server_default=func.now(), onupdate=utcnow)

    __table_args__ = (
        Index("idx_noticias_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<News id={self.id} title={self.title!r}>"
