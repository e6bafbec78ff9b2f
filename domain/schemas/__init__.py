"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.auth_schemas import (
    UserCreate,
    LoginRequest,
    TokenResponse,
    UserResponse,
)
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealMetrics,
)

__all__ = [
    # Auth schemas
    "UserCreate",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealMetrics",
]
