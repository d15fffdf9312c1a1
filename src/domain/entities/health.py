"""
Health domain entities.

This module defines the value objects produced by the dependency probes
and the consolidated report returned by the health endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional

SERVER_RUNNING = "running"
MAIL_READY = "ready"
NOT_REACHABLE = "not reachable"


@dataclass(slots=True)
class ProbeOutcome:
    """Result of a single dependency probe, folded into a report field."""

    field: str
    status: str
    ok: bool = True
    error: Optional[str] = None
    latency_ms: Optional[float] = None


@dataclass(slots=True)
class HealthReport:
    """Snapshot of every dependency status for one health request.

    Every field always holds a string. A failing dependency is described
    by its status text, never by a missing value.
    """

    db: str
    message_broker: str
    wide_column_store: str
    search_engine: str
    server: str = SERVER_RUNNING
    mail: str = MAIL_READY

    @classmethod
    def from_outcomes(cls, outcomes: Dict[str, ProbeOutcome]) -> "HealthReport":
        return cls(
            db=outcomes["db"].status,
            message_broker=outcomes["message_broker"].status,
            wide_column_store=outcomes["wide_column_store"].status,
            search_engine=outcomes["search_engine"].status,
        )

    def as_dict(self) -> Dict[str, str]:
        return {item.name: getattr(self, item.name) for item in fields(self)}
