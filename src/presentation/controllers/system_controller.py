"""System endpoints exposing dependency health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.dtos.health_dto import HealthFailureDTO, HealthReportDTO
from src.application.use_cases.health_use_cases import GetHealthStatusUseCase
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=HealthReportDTO,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": HealthFailureDTO}},
)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> HealthReportDTO | JSONResponse:
    """Return the status of every dependency the gateway relies on."""
    try:
        report = await get_health_status_use_case.execute()
        logger.debug("health.check.success", db=report.db)
        return report
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        failure = HealthFailureDTO(message="Health check failed", error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failure.model_dump(),
        )
