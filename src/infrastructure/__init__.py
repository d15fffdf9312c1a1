"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer: the PostgreSQL pool, the dependency probes and the OTP
and mail services.
"""

from src.infrastructure import database, services

__all__ = ["database", "services"]
