from fastapi import APIRouter, Depends

from ...schemas.queue import QueueJobResponse, QueueStatusResponse
from ...services.notification_queue import NotificationQueue
from ..dependencies import get_notification_queue

router = APIRouter()


@router.get("/status", response_model=QueueStatusResponse)
async def get_queue_status(queue: NotificationQueue = Depends(get_notification_queue)):
    queue_status = queue.status()
    return QueueStatusResponse(
        pending=queue_status.pending,
        processing=queue_status.processing,
        recent_jobs=[QueueJobResponse.model_validate(job) for job in queue.recent_jobs()],
    )
