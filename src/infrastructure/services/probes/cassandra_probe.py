"""Connect-and-disconnect probe for Cassandra."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional

from src.domain.entities.health import NOT_REACHABLE
from src.shared import get_logger

logger = get_logger(__name__)

ClusterFactory = Callable[..., Any]


def build_cluster(
    *, contact_point: str, port: int, local_dc: str, connect_timeout: float
) -> Any:
    """Create a driver ``Cluster`` bound to a single contact point."""
    # The driver picks its reactor at import time, so import on first use.
    from cassandra.cluster import EXEC_PROFILE_DEFAULT, Cluster, ExecutionProfile
    from cassandra.policies import DCAwareRoundRobinPolicy

    profile = ExecutionProfile(
        load_balancing_policy=DCAwareRoundRobinPolicy(local_dc=local_dc),
        request_timeout=connect_timeout,
    )
    return Cluster(
        contact_points=[contact_point],
        port=port,
        execution_profiles={EXEC_PROFILE_DEFAULT: profile},
        connect_timeout=connect_timeout,
        control_connection_timeout=connect_timeout,
    )


class CassandraProbe:
    """Open a dedicated cluster connection and close it again."""

    name = "cassandra"
    field = "wide_column_store"

    def __init__(
        self,
        contact_point: str,
        local_dc: str,
        keyspace: str,
        port: int = 9042,
        connect_timeout: float = 5.0,
        cluster_factory: Optional[ClusterFactory] = None,
    ):
        self._contact_point = contact_point
        self._local_dc = local_dc
        self._keyspace = keyspace
        self._port = port
        self._connect_timeout = connect_timeout
        self._cluster_factory = cluster_factory or build_cluster

    async def check(self) -> str:
        await asyncio.to_thread(self._connect_and_close)
        logger.debug(
            "health.probe.cassandra.ok",
            contact_point=self._contact_point,
            keyspace=self._keyspace,
        )
        return "running"

    def failure_status(self, exc: BaseException) -> str:
        return NOT_REACHABLE

    def _connect_and_close(self) -> None:
        cluster = self._cluster_factory(
            contact_point=self._contact_point,
            port=self._port,
            local_dc=self._local_dc,
            connect_timeout=self._connect_timeout,
        )
        try:
            cluster.connect(self._keyspace)
        finally:
            cluster.shutdown()
