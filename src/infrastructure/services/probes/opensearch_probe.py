"""Cluster info probe for OpenSearch."""

from __future__ import annotations

from typing import Any

import httpx

from src.domain.entities.health import NOT_REACHABLE
from src.shared import get_logger

logger = get_logger(__name__)

MISSING_CLUSTER_NAME = "responded without cluster_name"


class OpenSearchProbe:
    """Query the root endpoint and report the cluster name.

    Unlike the other probes this one has three outcomes: running, reachable
    but missing ``cluster_name``, and not reachable.
    """

    name = "opensearch"
    field = "search_engine"

    def __init__(self, base_url: str, timeout: float = 5.0):
        self._url = base_url
        self._timeout = timeout

    async def check(self) -> str:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(self._url)
            response.raise_for_status()

        cluster_name = self._extract_cluster_name(response)
        if not cluster_name:
            logger.warning("health.probe.opensearch.no_cluster_name", url=self._url)
            return MISSING_CLUSTER_NAME

        logger.debug("health.probe.opensearch.ok", cluster_name=cluster_name)
        return f"running ({cluster_name})"

    def failure_status(self, exc: BaseException) -> str:
        return NOT_REACHABLE

    @staticmethod
    def _extract_cluster_name(response: httpx.Response) -> Any:
        try:
            payload = response.json()
        except ValueError:
            return None
        if not isinstance(payload, dict):
            return None
        return payload.get("cluster_name")
