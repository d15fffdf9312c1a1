"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses:
the routers and the application-wide exception handlers.
"""

from src.presentation import controllers, exception_handlers

__all__ = ["controllers", "exception_handlers"]
