"""Port describing a single dependency probe."""

from __future__ import annotations

from typing import Protocol


class IDependencyProbe(Protocol):
    """One bounded attempt to reach an external system.

    ``check`` returns the success status text and raises on any failure.
    ``failure_status`` maps that failure to the text stored in the report,
    so each probe decides how much of the error it exposes.
    """

    name: str
    field: str

    async def check(self) -> str:
        ...

    def failure_status(self, exc: BaseException) -> str:
        ...
