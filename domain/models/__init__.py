"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    IsoDateTime,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.user import AppUser
from domain.models.meal import Meal

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "IsoDateTime",
    "build_engine",
    "init_database",
    "get_db_session",
    # User models
    "AppUser",
    # Meal models
    "Meal",
]
