"""Domain ports package."""

from .dependency_probe import IDependencyProbe
from .health_check import IHealthCheckService
from .otp import IMailSender, IOtpGenerator

__all__ = ["IHealthCheckService", "IDependencyProbe", "IOtpGenerator", "IMailSender"]
