"""
In-memory notification queue.

Jobs are processed one at a time, in the order they were enqueued, by a single
asyncio task that exits once the queue is drained and is started again by the
next enqueue. Jobs are never persisted or retried.
"""

import asyncio
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

import structlog

from ..exceptions import JobDeliveryError
from .notification_sender import NotificationSender

logger = structlog.get_logger(__name__)


class JobType(str, Enum):
    NOTIFICATION = "notification"


class JobStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class QueueJob:
    payload: Dict[str, Any]
    type: JobType = JobType.NOTIFICATION
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: JobStatus = JobStatus.PENDING
    created_at: datetime = field(default_factory=_now)
    processed_at: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.status in (JobStatus.COMPLETED, JobStatus.FAILED)


@dataclass
class QueueStatus:
    pending: int
    processing: bool


class NotificationQueue:
    def __init__(
        self,
        sender: NotificationSender,
        job_delay_seconds: float = 1.0,
        history_size: int = 100,
    ):
        self.sender = sender
        self.job_delay_seconds = job_delay_seconds
        self._queue: Deque[QueueJob] = deque()
        self._history: Deque[QueueJob] = deque(maxlen=history_size)
        self._worker: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    def enqueue(self, payload: Dict[str, Any], job_type: JobType = JobType.NOTIFICATION) -> QueueJob:
        """Append a job to the tail and return it without waiting for delivery."""
        job = QueueJob(payload=payload, type=job_type)
        self._queue.append(job)
        logger.info("job_enqueued", job_id=job.id, job_type=job.type.value, pending=len(self._queue))

        if not self.is_running:
            self._worker = asyncio.get_running_loop().create_task(self._process_queue())

        return job

    def status(self) -> QueueStatus:
        return QueueStatus(pending=len(self._queue), processing=self.is_running)

    def recent_jobs(self) -> List[QueueJob]:
        return list(self._history)

    async def wait_until_idle(self) -> None:
        while self.is_running:
            await asyncio.shield(self._worker)

    async def close(self) -> None:
        if self._queue:
            logger.warning("queue_closed_with_pending_jobs", pending=len(self._queue))
        self._queue.clear()

        if self.is_running:
            self._worker.cancel()
            try:
                await self._worker
            except asyncio.CancelledError:
                pass
        self._worker = None

    async def _process_queue(self) -> None:
        logger.debug("queue_worker_started")
        while self._queue:
            job = self._queue.popleft()
            await self._run_job(job)
            await asyncio.sleep(self.job_delay_seconds)
        logger.debug("queue_worker_stopped")

    async def _run_job(self, job: QueueJob) -> None:
        job.status = JobStatus.PROCESSING
        logger.info("job_processing", job_id=job.id, job_type=job.type.value)

        try:
            await self._dispatch(job)
        except asyncio.CancelledError:
            job.status = JobStatus.FAILED
            job.error = "queue closed"
            logger.warning("job_cancelled", job_id=job.id, job_type=job.type.value)
            raise
        except Exception as e:
            job.status = JobStatus.FAILED
            job.error = str(e)
            logger.error("job_failed", job_id=job.id, job_type=job.type.value, error=str(e))
        else:
            job.status = JobStatus.COMPLETED
            job.processed_at = _now()
            logger.info("job_completed", job_id=job.id, job_type=job.type.value)
        finally:
            self._history.append(job)

    async def _dispatch(self, job: QueueJob) -> None:
        if job.type == JobType.NOTIFICATION:
            await self.sender.send(job.payload)
            return
        raise JobDeliveryError(f"Unknown job type: {job.type}", details={"job_id": job.id})
