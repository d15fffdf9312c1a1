from __future__ import annotations

import httpx
import pytest

from src.infrastructure.services.probes.opensearch_probe import (
    MISSING_CLUSTER_NAME,
    OpenSearchProbe,
)

from tests.conftest import make_response


@pytest.mark.asyncio
async def test_check_reports_cluster_name(patch_http) -> None:
    requests = patch_http(
        lambda url: make_response(
            url, json={"cluster_name": "payments-search", "version": {}}
        )
    )

    status = await OpenSearchProbe("http://search:9200").check()

    assert status == "running (payments-search)"
    assert requests == ["http://search:9200"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {"name": "node-1"}},
        {"json": {"cluster_name": ""}},
        {"json": ["not", "an", "object"]},
        {"text": "OK"},
    ],
)
async def test_check_without_cluster_name(patch_http, kwargs) -> None:
    patch_http(lambda url: make_response(url, **kwargs))
    assert await OpenSearchProbe("http://search:9200").check() == MISSING_CLUSTER_NAME
    assert MISSING_CLUSTER_NAME == "responded without cluster_name"


@pytest.mark.asyncio
async def test_non_success_status_raises(patch_http) -> None:
    patch_http(lambda url: make_response(url, 401, json={"cluster_name": "x"}))
    with pytest.raises(httpx.HTTPStatusError):
        await OpenSearchProbe("http://search:9200").check()


@pytest.mark.asyncio
async def test_timeout_raises(patch_http) -> None:
    patch_http(lambda url: httpx.ReadTimeout("timed out"))
    with pytest.raises(httpx.ReadTimeout):
        await OpenSearchProbe("http://search:9200").check()


def test_failure_status_is_not_reachable() -> None:
    probe = OpenSearchProbe("http://search:9200")
    assert probe.failure_status(httpx.ConnectError("refused")) == "not reachable"
