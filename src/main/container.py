"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.health_use_cases import GetHealthStatusUseCase
from src.application.use_cases.otp_use_cases import (
    SendOtpEmailUseCase,
    VerifyOtpUseCase,
)
from src.infrastructure.database import PostgresDatabase
from src.infrastructure.services.email_service import SmtpEmailService
from src.infrastructure.services.health_check_service import HealthCheckService
from src.infrastructure.services.otp_service import OtpService
from src.infrastructure.services.probes import (
    CassandraProbe,
    KafkaConnectProbe,
    OpenSearchProbe,
    PostgresProbe,
)
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    postgres_database = providers.Singleton(
        PostgresDatabase,
        database_url=config.database.url,
        pool_size=config.database.pool_size,
        max_overflow=config.database.max_overflow,
        pool_timeout=config.database.pool_timeout,
    )

    # Probes
    postgres_probe = providers.Singleton(
        PostgresProbe,
        database=postgres_database,
        mode=config.database.mode,
    )

    kafka_connect_probe = providers.Singleton(
        KafkaConnectProbe,
        base_url=config.kafka_connect.url,
        timeout=config.health.http_timeout,
    )

    cassandra_probe = providers.Singleton(
        CassandraProbe,
        contact_point=config.cassandra.host,
        local_dc=config.cassandra.dc,
        keyspace=config.cassandra.keyspace,
        port=config.cassandra.port,
        connect_timeout=config.cassandra.connect_timeout,
    )

    opensearch_probe = providers.Singleton(
        OpenSearchProbe,
        base_url=config.opensearch.url,
        timeout=config.health.http_timeout,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        probes=providers.List(
            postgres_probe,
            kafka_connect_probe,
            cassandra_probe,
            opensearch_probe,
        ),
        probe_timeout=config.health.probe_timeout,
    )

    # OTP collaborators
    otp_service = providers.Singleton(
        OtpService,
        length=config.otp.length,
        ttl_seconds=config.otp.ttl_seconds,
    )

    mail_sender = providers.Singleton(
        SmtpEmailService,
        host=config.smtp.host,
        port=config.smtp.port,
        sender=config.smtp.sender,
        username=config.smtp.username,
        password=config.smtp.password,
        use_tls=config.smtp.use_tls,
        timeout=config.smtp.timeout,
        ttl_seconds=config.otp.ttl_seconds,
    )

    # Application (use cases)
    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    send_otp_email_use_case = providers.Factory(
        SendOtpEmailUseCase,
        otp_generator=otp_service,
        mail_sender=mail_sender,
        recipient_name=config.otp.recipient_name,
    )

    verify_otp_use_case = providers.Factory(
        VerifyOtpUseCase,
        otp_generator=otp_service,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    The SQLAlchemy engine connects lazily, so startup only logs. On
    shutdown the pool is disposed so no connection outlives the app.
    """
    container = get_container()
    postgres_database = container.postgres_database()

    try:
        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.postgres.dispose")
        await postgres_database.dispose()
        logger.info("container.resources.shutdown")
