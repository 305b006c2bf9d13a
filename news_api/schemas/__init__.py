from .news import (
    NewsCreateRequest,
    NewsUpdateRequest,
    NewsResponse,
    PaginationMeta,
    PaginatedNewsResponse,
)
from .queue import QueueJobResponse, QueueStatusResponse

__all__ = [
    "NewsCreateRequest",
    "NewsUpdateRequest",
    "NewsResponse",
    "PaginationMeta",
    "PaginatedNewsResponse",
    "QueueJobResponse",
    "QueueStatusResponse",
]
