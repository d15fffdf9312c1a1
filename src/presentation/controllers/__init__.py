"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers map application use case
results and domain errors to HTTP status codes and bodies.
"""

from .otp_controller import router as otp_router
from .system_controller import router as system_router

__all__ = ["system_router", "otp_router"]
