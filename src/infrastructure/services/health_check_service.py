"""Infrastructure implementation for the dependency health report."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Dict, Sequence

from src.domain.entities.health import HealthReport, ProbeOutcome
from src.domain.ports.dependency_probe import IDependencyProbe
from src.domain.ports.health_check import IHealthCheckService
from src.shared import get_logger

logger = get_logger(__name__)

REPORT_FIELDS = ("db", "message_broker", "wide_column_store", "search_engine")


class HealthCheckService(IHealthCheckService):
    """Run every dependency probe and fold the results into one report."""

    def __init__(
        self,
        probes: Sequence[IDependencyProbe],
        *,
        probe_timeout: float = 10.0,
    ) -> None:
        fields = sorted(probe.field for probe in probes)
        if fields != sorted(REPORT_FIELDS):
            raise ValueError(
                f"Expected one probe per report field {REPORT_FIELDS}, got {fields}"
            )
        self._probes = list(probes)
        self._probe_timeout = probe_timeout

    async def evaluate(self) -> HealthReport:
        """Run probes concurrently; a failing probe only affects its own field."""

        tasks = {
            probe.field: asyncio.create_task(self._run_probe(probe))
            for probe in self._probes
        }

        outcomes: Dict[str, ProbeOutcome] = {}
        try:
            for field, task in tasks.items():
                outcomes[field] = await task
        finally:
            for task in tasks.values():
                if not task.done():
                    task.cancel()

        logger.info(
            "health.check.completed",
            **{
                field: {"ok": outcome.ok, "latency_ms": outcome.latency_ms}
                for field, outcome in outcomes.items()
            },
        )
        return HealthReport.from_outcomes(outcomes)

    async def _run_probe(self, probe: IDependencyProbe) -> ProbeOutcome:
        start = perf_counter()
        try:
            status = await asyncio.wait_for(probe.check(), timeout=self._probe_timeout)
        except Exception as exc:
            latency_ms = (perf_counter() - start) * 1000
            error = str(exc) or exc.__class__.__name__
            logger.warning(
                "health.probe.failed",
                probe=probe.name,
                error=error,
                latency_ms=latency_ms,
                exc_info=exc,
            )
            return ProbeOutcome(
                field=probe.field,
                status=probe.failure_status(exc),
                ok=False,
                error=error,
                latency_ms=latency_ms,
            )

        return ProbeOutcome(
            field=probe.field,
            status=status,
            latency_ms=(perf_counter() - start) * 1000,
        )
