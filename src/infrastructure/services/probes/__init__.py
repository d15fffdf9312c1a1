"""Dependency probes used by the health check service."""

from .cassandra_probe import CassandraProbe
from .kafka_connect_probe import KafkaConnectProbe
from .opensearch_probe import OpenSearchProbe
from .postgres_probe import PostgresProbe

__all__ = ["PostgresProbe", "KafkaConnectProbe", "CassandraProbe", "OpenSearchProbe"]
