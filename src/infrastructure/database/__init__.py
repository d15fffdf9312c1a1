"""
Database package - Infrastructure Layer

This package contains the relational datastore connection shared by the
whole process.
"""

from src.infrastructure.database.postgres_database import PostgresDatabase

__all__ = ["PostgresDatabase"]
