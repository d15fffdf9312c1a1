"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import HealthReport


class IHealthCheckService(Protocol):
    """Interface for retrieving the consolidated dependency report."""

    async def evaluate(self) -> HealthReport:
        """Probe every dependency and assemble a fully populated report."""
        ...
