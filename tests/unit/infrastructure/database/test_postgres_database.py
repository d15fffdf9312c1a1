from __future__ import annotations

from typing import Any, Dict, List

import pytest

from src.infrastructure.database.postgres_database import PostgresDatabase


class _Result:
    def scalar(self) -> int:
        return 1


class _Connection:
    def __init__(self, engine: "_StubEngine") -> None:
        self._engine = engine

    async def __aenter__(self) -> "_Connection":
        self._engine.open_connections += 1
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._engine.open_connections -= 1

    async def execute(self, statement: Any) -> _Result:
        self._engine.statements.append(str(statement))
        if self._engine.error is not None:
            raise self._engine.error
        return _Result()


class _StubEngine:
    def __init__(self) -> None:
        self.statements: List[str] = []
        self.open_connections = 0
        self.error: Exception | None = None
        self.disposed = False

    def connect(self) -> _Connection:
        return _Connection(self)

    async def dispose(self) -> None:
        self.disposed = True


@pytest.fixture()
def engine_kwargs(monkeypatch) -> Dict[str, Any]:
    captured: Dict[str, Any] = {}
    engine = _StubEngine()

    def _create(url: str, **kwargs: Any) -> _StubEngine:
        captured.update(url=url, engine=engine, **kwargs)
        return engine

    monkeypatch.setattr(
        "src.infrastructure.database.postgres_database.create_async_engine", _create
    )
    return captured


def test_engine_uses_pool_settings(engine_kwargs) -> None:
    PostgresDatabase("postgresql+asyncpg://u:p@db/payments", pool_size=3)

    assert engine_kwargs["url"] == "postgresql+asyncpg://u:p@db/payments"
    assert engine_kwargs["pool_size"] == 3
    assert engine_kwargs["max_overflow"] == 10
    assert engine_kwargs["pool_pre_ping"] is True


@pytest.mark.asyncio
async def test_ping_runs_select_one_and_returns_connection(engine_kwargs) -> None:
    database = PostgresDatabase("postgresql+asyncpg://db/payments")
    engine = engine_kwargs["engine"]

    assert await database.ping() == 1
    assert engine.statements == ["SELECT 1"]
    assert engine.open_connections == 0


@pytest.mark.asyncio
async def test_ping_propagates_driver_error(engine_kwargs) -> None:
    database = PostgresDatabase("postgresql+asyncpg://db/payments")
    engine = engine_kwargs["engine"]
    engine.error = OSError("could not connect to server")

    with pytest.raises(OSError, match="could not connect to server"):
        await database.ping()
    assert engine.open_connections == 0


@pytest.mark.asyncio
async def test_dispose_closes_pool(engine_kwargs) -> None:
    database = PostgresDatabase("postgresql+asyncpg://db/payments")
    await database.dispose()
    assert engine_kwargs["engine"].disposed is True
