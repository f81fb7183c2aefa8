"""
Shared dependencies across the application.

This module contains dependency functions that can be used
across different features.
"""

from fastapi import Request

from hospital.database import Database


def get_database(request: Request) -> Database:
    """Dependency for the database handle created by the application factory."""
    return request.app.state.database


__all__ = ["get_database"]
