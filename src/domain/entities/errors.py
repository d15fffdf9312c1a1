"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidIdentityError(DomainError):
    """Raised when an OTP request carries no usable identity."""

    def __init__(
        self,
        message: str = "Email required",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


class OtpDeliveryError(DomainError):
    """Raised when the mail collaborator fails to deliver a code."""


class OtpVerificationError(DomainError):
    """Raised when a submitted code does not match the issued one."""

    def __init__(
        self,
        message: str = "Invalid or expired OTP",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
