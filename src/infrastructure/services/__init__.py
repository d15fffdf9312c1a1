"""Infrastructure services package."""

from .email_service import SmtpEmailService
from .health_check_service import HealthCheckService
from .otp_service import OtpService

__all__ = ["HealthCheckService", "OtpService", "SmtpEmailService"]
