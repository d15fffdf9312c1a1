"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It orchestrates the domain ports and shapes the
results into DTOs for the presentation layer.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
