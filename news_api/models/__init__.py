from .news import News

__all__ = ["News"]
