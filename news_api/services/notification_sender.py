import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx
import structlog

from ..exceptions import JobDeliveryError

logger = structlog.get_logger(__name__)


class NotificationSender:
    """
    Delivers news notifications.

    With a webhook URL the payload is POSTed as JSON; without one, delivery is
    simulated with a short sleep and a log line.
    """

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        timeout_seconds: float = 10.0,
        simulated_latency_seconds: float = 0.5,
    ):
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds
        self.simulated_latency_seconds = simulated_latency_seconds

    async def send(self, payload: Dict[str, Any]) -> None:
        message = {**payload, "timestamp": datetime.now(timezone.utc).isoformat()}

        if not self.webhook_url:
            await asyncio.sleep(self.simulated_latency_seconds)
            logger.info("notification_sent", channel="log", **message)
            return

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(self.webhook_url, json=message)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise JobDeliveryError(
                f"Webhook responded with {e.response.status_code}",
                details={"url": self.webhook_url, "status_code": e.response.status_code}
            ) from e
        except httpx.HTTPError as e:
            raise JobDeliveryError(
                f"Webhook request failed: {str(e)}",
                details={"url": self.webhook_url}
            ) from e

        logger.info("notification_sent", channel="webhook", url=self.webhook_url, **message)
