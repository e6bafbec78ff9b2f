from typing import Iterable
from sqlalchemy.orm import Session
import logging

from domain.schemas.meal_schemas import MealMetrics
from repositories import MealRepository

logger = logging.getLogger("dailydiet.metrics")


def compute_metrics(meals: Iterable) -> MealMetrics:
    """
    Summarize diet adherence over meals, taken in the order given.

    Any off-diet meal resets the running streak to zero, so best_streak is
    the longest unbroken run of on-diet meals. An empty sequence gives all
    zeros.

    Args:
        meals: objects with an ``on_diet`` attribute, oldest first

    Returns:
        MealMetrics with total, inside, outside and best_streak
    """
    total = 0
    inside = 0
    current = 0
    best_streak = 0

    for meal in meals:
        total += 1
        if meal.on_diet:
            inside += 1
            current += 1
        else:
            current = 0
        best_streak = max(best_streak, current)

    return MealMetrics(
        total=total,
        inside=inside,
        outside=total - inside,
        best_streak=best_streak,
    )


class MetricsService:
    @staticmethod
    def get_metrics(db: Session, user_id: int) -> MealMetrics:
        """Adherence metrics over every meal user_id has logged"""
        meals = MealRepository(db).list_for_user(user_id)
        metrics = compute_metrics(meals)
        logger.debug(
            f"metrics_computed user_id={user_id} total={metrics.total} "
            f"best_streak={metrics.best_streak}"
        )
        return metrics
