import asyncio

import pytest
from unittest.mock import MagicMock, AsyncMock, patch

from news_api.exceptions import JobDeliveryError
from news_api.services.notification_queue import (
    NotificationQueue,
    JobStatus,
    JobType,
)


def make_sender(side_effect=None):
    sender = MagicMock()
    sender.send = AsyncMock(side_effect=side_effect)
    return sender


@pytest.mark.asyncio
async def test_enqueue_returns_pending_job_immediately():
    queue = NotificationQueue(make_sender(), job_delay_seconds=0)

    job = queue.enqueue({"type": "news_created", "newsId": "abc", "title": "Hello"})

    assert job.status == JobStatus.PENDING
    assert job.type == JobType.NOTIFICATION
    assert job.processed_at is None
    assert queue.status().pending == 1
    assert queue.status().processing is True

    await queue.wait_until_idle()


@pytest.mark.asyncio
async def test_jobs_are_processed_in_fifo_order_one_at_a_time():
    jobs = []
    deliveries = []

    async def send(payload):
        deliveries.append({
            "n": payload["n"],
            "statuses": [job.status for job in jobs],
        })
        await asyncio.sleep(0)

    queue = NotificationQueue(make_sender(send), job_delay_seconds=0)
    for n in range(3):
        jobs.append(queue.enqueue({"n": n}))

    assert [job.status for job in jobs] == [JobStatus.PENDING] * 3

    await queue.wait_until_idle()

    assert [d["n"] for d in deliveries] == [0, 1, 2]
    for index, delivery in enumerate(deliveries):
        assert delivery["statuses"].count(JobStatus.PROCESSING) == 1
        assert delivery["statuses"][index] == JobStatus.PROCESSING
        assert all(status == JobStatus.COMPLETED for status in delivery["statuses"][:index])
        assert all(status == JobStatus.PENDING for status in delivery["statuses"][index + 1:])

    assert all(job.status == JobStatus.COMPLETED for job in jobs)
    assert all(job.processed_at is not None for job in jobs)
    assert [job.id for job in queue.recent_jobs()] == [job.id for job in jobs]


@pytest.mark.asyncio
async def test_failed_delivery_is_terminal_and_does_not_stop_the_worker():
    async def send(payload):
        if payload["n"] == 1:
            raise JobDeliveryError("webhook unreachable")

    sender = make_sender(send)
    queue = NotificationQueue(sender, job_delay_seconds=0)
    jobs = [queue.enqueue({"n": n}) for n in range(3)]

    await queue.wait_until_idle()

    assert [job.status for job in jobs] == [JobStatus.COMPLETED, JobStatus.FAILED, JobStatus.COMPLETED]
    assert jobs[1].processed_at is None
    assert jobs[1].error == "webhook unreachable"
    # no retry
    assert sender.send.await_count == 3


@pytest.mark.asyncio
async def test_worker_stops_when_drained_and_restarts_on_enqueue():
    sender = make_sender()
    queue = NotificationQueue(sender, job_delay_seconds=0)

    first = queue.enqueue({"n": 1})
    await queue.wait_until_idle()

    assert queue.status().processing is False
    assert queue.status().pending == 0
    assert first.status == JobStatus.COMPLETED

    second = queue.enqueue({"n": 2})
    assert queue.status().processing is True

    await queue.wait_until_idle()

    assert second.status == JobStatus.COMPLETED
    assert sender.send.await_count == 2


@pytest.mark.asyncio
async def test_waits_between_jobs():
    sleeps = []
    queue = NotificationQueue(make_sender(), job_delay_seconds=0.01)

    original_sleep = asyncio.sleep

    async def recording_sleep(delay, *args, **kwargs):
        sleeps.append(delay)
        await original_sleep(0)

    with patch("news_api.services.notification_queue.asyncio.sleep", new=recording_sleep):
        queue.enqueue({"n": 1})
        queue.enqueue({"n": 2})
        await queue.wait_until_idle()

    assert sleeps == [0.01, 0.01]


@pytest.mark.asyncio
async def test_history_is_bounded():
    queue = NotificationQueue(make_sender(), job_delay_seconds=0, history_size=2)
    jobs = [queue.enqueue({"n": n}) for n in range(4)]

    await queue.wait_until_idle()

    assert [job.id for job in queue.recent_jobs()] == [jobs[2].id, jobs[3].id]


@pytest.mark.asyncio
async def test_close_drops_pending_jobs_and_stops_worker():
    release = asyncio.Event()

    async def send(payload):
        await release.wait()

    queue = NotificationQueue(make_sender(send), job_delay_seconds=0)
    first = queue.enqueue({"n": 1})
    second = queue.enqueue({"n": 2})

    # let the worker pick up the first job
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    assert first.status == JobStatus.PROCESSING

    await queue.close()

    assert queue.status().pending == 0
    assert queue.status().processing is False
    assert second.status == JobStatus.PENDING
    assert second not in queue.recent_jobs()


@pytest.mark.asyncio
async def test_close_marks_in_flight_job_failed():
    release = asyncio.Event()

    async def send(payload):
        await release.wait()

    queue = NotificationQueue(make_sender(send), job_delay_seconds=0)
    job = queue.enqueue({"n": 1})

    await asyncio.sleep(0)
    await asyncio.sleep(0)
    assert job.status == JobStatus.PROCESSING

    await queue.close()

    assert job.status == JobStatus.FAILED
    assert job.error == "queue closed"
    assert job.processed_at is None
    assert job.is_finished
    assert queue.recent_jobs() == [job]
