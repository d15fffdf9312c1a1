"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    DomainError,
    InvalidIdentityError,
    OtpDeliveryError,
    OtpVerificationError,
)
from .health import HealthReport, ProbeOutcome
from .otp import OneTimeCode

__all__ = [
    "HealthReport",
    "ProbeOutcome",
    "OneTimeCode",
    "DomainError",
    "InvalidIdentityError",
    "OtpDeliveryError",
    "OtpVerificationError",
]
