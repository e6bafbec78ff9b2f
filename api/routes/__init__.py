"""API routes package"""

from . import auth, users, meals, metrics, health

__all__ = ["auth", "users", "meals", "metrics", "health"]
