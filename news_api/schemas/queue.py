from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..services.notification_queue import JobStatus, JobType


class QueueJobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: JobType
    payload: Dict[str, Any]
    status: JobStatus
    created_at: datetime
    processed_at: Optional[datetime] = None
    error: Optional[str] = None


class QueueStatusResponse(BaseModel):
    pending: int
    processing: bool
    recent_jobs: List[QueueJobResponse] = []
