"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import HealthFailureDTO, HealthReportDTO
from .otp_dto import MessageDTO, OtpResponseDTO, SendOtpRequestDTO, VerifyOtpRequestDTO

__all__ = [
    "HealthReportDTO",
    "HealthFailureDTO",
    "SendOtpRequestDTO",
    "VerifyOtpRequestDTO",
    "OtpResponseDTO",
    "MessageDTO",
]
