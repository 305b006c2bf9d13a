from .news_service import NewsService
from .notification_queue import NotificationQueue, QueueJob, JobStatus, JobType
from .notification_sender import NotificationSender

__all__ = ["NewsService", "NotificationQueue", "QueueJob", "JobStatus", "JobType", "NotificationSender"]
