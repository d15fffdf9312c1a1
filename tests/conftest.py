from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, List, Optional

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class StubProbe:
    """Probe double that succeeds with ``status`` or raises ``error``."""

    def __init__(
        self,
        name: str,
        field: str,
        status: str = "running",
        error: Optional[BaseException] = None,
        failure: Callable[[BaseException], str] = lambda exc: "not reachable",
    ) -> None:
        self.name = name
        self.field = field
        self._status = status
        self._error = error
        self._failure = failure
        self.calls = 0

    async def check(self) -> str:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._status

    def failure_status(self, exc: BaseException) -> str:
        return self._failure(exc)


def db_failure(exc: BaseException) -> str:
    return f"error: {exc}"


@pytest.fixture()
def healthy_probes() -> List[StubProbe]:
    return [
        StubProbe("postgres", "db", "Local PostgreSQL", failure=db_failure),
        StubProbe("kafka_connect", "message_broker", "running (2 connectors)"),
        StubProbe("cassandra", "wide_column_store", "running"),
        StubProbe("opensearch", "search_engine", "running (opensearch)"),
    ]


class FakeMailSender:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.sent: List[tuple[str, str, str]] = []

    async def send_otp_email(self, recipient: str, name: str, code: str) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append((recipient, name, code))


class FakeOtpGenerator:
    def __init__(self, code: str = "123456", valid: bool = True) -> None:
        self.code = code
        self.valid = valid
        self.issued: List[str] = []
        self.verified: List[tuple[str, str]] = []

    async def create_otp(self, identity: str) -> str:
        self.issued.append(identity)
        return self.code

    async def verify_otp(self, identity: str, code: str) -> bool:
        self.verified.append((identity, code))
        return self.valid and code == self.code


@pytest.fixture()
def fake_mail_sender() -> FakeMailSender:
    return FakeMailSender()


@pytest.fixture()
def fake_otp_generator() -> FakeOtpGenerator:
    return FakeOtpGenerator()


class FakeAsyncClient:
    """Stand-in for ``httpx.AsyncClient`` driven by a response factory."""

    requests: List[str] = []

    def __init__(self, handler: Callable[[str], Any], timeout: float | None = None):
        self._handler = handler
        self.timeout = timeout

    async def __aenter__(self) -> "FakeAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        FakeAsyncClient.requests.append(url)
        result = self._handler(url)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture()
def patch_http(monkeypatch):
    """Route ``httpx.AsyncClient`` through ``handler(url)``."""

    FakeAsyncClient.requests = []

    def _install(handler: Callable[[str], Any]) -> List[str]:
        monkeypatch.setattr(
            "httpx.AsyncClient",
            lambda timeout=None, **kwargs: FakeAsyncClient(handler, timeout),
        )
        return FakeAsyncClient.requests

    return _install


def make_response(url: str, status_code: int = 200, **kwargs: Any) -> httpx.Response:
    return httpx.Response(status_code, request=httpx.Request("GET", url), **kwargs)
