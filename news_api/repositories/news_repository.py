from typing import List, Optional, Tuple, Dict, Any

from sqlalchemy import desc
from sqlalchemy.orm import sessionmaker

from ..models.news import News, utcnow


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so a filter matches its text literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class NewsRepository:
    """Table access for news items. Every call runs in its own session and transaction."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def create(self, title: str, description: str) -> News:
        with self.session_factory() as session:
            news = News(title=title, description=description)
            session.add(news)
            session.commit()
            session.refresh(news)
            return news

    def get_by_id(self, news_id: str) -> Optional[News]:
        with self.session_factory() as session:
            return session.query(News).filter(News.id == news_id).first()

    def list_paginated(
        self,
        offset: int = 0,
        limit: int = 10,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Tuple[List[News], int]:
        with self.session_factory() as session:
            query = session.query(News)

            if title:
                query = query.filter(News.title.like(f"%{escape_like(title)}%", escape="\\"))
            if description:
                query = query.filter(News.description.like(f"%{escape_like(description)}%", escape="\\"))

            total = query.count()

            items = (
                query.order_by(desc(News.created_at))
                .offset(offset)
                .limit(limit)
                .all()
            )
            return items, total

    def update(self, news_id: str, fields: Dict[str, Any]) -> Optional[News]:
        with self.session_factory() as session:
            news = session.query(News).filter(News.id == news_id).first()
            if not news:
                return None

            for key, value in fields.items():
                setattr(news, key, value)
            news.updated_at = utcnow()

            session.commit()
            session.refresh(news)
            return news

    def delete(self, news_id: str) -> bool:
        with self.session_factory() as session:
            news = session.query(News).filter(News.id == news_id).first()
            if not news:
                return False
            session.delete(news)
            session.commit()
            return True
