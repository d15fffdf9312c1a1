"""Application-wide exception handlers."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.shared import get_logger

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback and answer with a body that carries no internals."""
    logger.error(
        "request.unhandled_error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(Exception, unhandled_exception_handler)
