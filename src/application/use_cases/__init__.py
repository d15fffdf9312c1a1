"""
Use Cases Package - Application Layer

This package contains the application use cases that orchestrate
domain ports on behalf of the presentation layer.
"""

from .health_use_cases import GetHealthStatusUseCase
from .otp_use_cases import SendOtpEmailUseCase, VerifyOtpUseCase

__all__ = ["GetHealthStatusUseCase", "SendOtpEmailUseCase", "VerifyOtpUseCase"]
