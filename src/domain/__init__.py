"""
Domain Layer Package

This package contains the core business rules of the gateway: the
health report model, OTP entities and the ports implemented by the
infrastructure layer. It has no dependencies on frameworks.
"""

# Re-export submodules
from src.domain import entities, ports

__all__ = ["entities", "ports"]
