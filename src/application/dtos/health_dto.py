"""DTOs for the dependency health response."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.health import HealthReport


class HealthReportDTO(BaseModel):
    """DTO representing the /health response payload.

    Every field is a required string so a report can never be serialized
    with a dependency missing.
    """

    server: str = Field(description="Server process status")
    db: str = Field(description="PostgreSQL status or error")
    message_broker: str = Field(
        alias="messageBroker", description="Kafka Connect status"
    )
    wide_column_store: str = Field(
        alias="wideColumnStore", description="Cassandra status"
    )
    search_engine: str = Field(alias="searchEngine", description="OpenSearch status")
    mail: str = Field(description="SMTP readiness")

    @classmethod
    def from_domain(cls, report: HealthReport) -> "HealthReportDTO":
        return cls(
            server=report.server,
            db=report.db,
            message_broker=report.message_broker,
            wide_column_store=report.wide_column_store,
            search_engine=report.search_engine,
            mail=report.mail,
        )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "server": "running",
                "db": "Local PostgreSQL",
                "messageBroker": "running (3 connectors)",
                "wideColumnStore": "running",
                "searchEngine": "running (opensearch-cluster)",
                "mail": "ready",
            }
        },
    )


class HealthFailureDTO(BaseModel):
    """Body returned when the health report itself cannot be produced."""

    message: str = Field(description="Summary of the failure")
    error: str = Field(description="Underlying error message")
