"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.meal_service import MealService
from services.metrics_service import MetricsService, compute_metrics
from services.security import SessionAuthority, hash_password, verify_password

__all__ = [
    "AuthService",
    "MealService",
    "MetricsService",
    "compute_metrics",
    "SessionAuthority",
    "hash_password",
    "verify_password",
]
