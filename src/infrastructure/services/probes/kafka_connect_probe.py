"""Reachability probe for the Kafka Connect REST API."""

from __future__ import annotations

import httpx

from src.domain.entities.health import NOT_REACHABLE
from src.shared import get_logger

logger = get_logger(__name__)


class KafkaConnectProbe:
    """List the registered connectors and report how many there are."""

    name = "kafka_connect"
    field = "message_broker"

    def __init__(self, base_url: str, timeout: float = 5.0):
        self._url = f"{base_url.rstrip('/')}/connectors"
        self._timeout = timeout

    async def check(self) -> str:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(self._url)
            response.raise_for_status()

        connectors = response.json()
        logger.debug(
            "health.probe.kafka_connect.ok",
            url=self._url,
            connectors=len(connectors),
        )
        return f"running ({len(connectors)} connectors)"

    def failure_status(self, exc: BaseException) -> str:
        return NOT_REACHABLE
