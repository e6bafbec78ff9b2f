"""
Meal Repository - Owner-scoped data access for logged meals.

Every lookup filters on both meal_id and user_id, so a meal owned by someone
else behaves exactly like a meal that does not exist.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_for_user(self, user_id: int, meal_id: int) -> Optional[Meal]:
        """Get a meal only if it belongs to user_id"""
        return (
            self.db.query(Meal)
            .filter(Meal.meal_id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: int) -> List[Meal]:
        """All meals of a user in insertion order"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.meal_id.asc())
            .all()
        )

    def create_meal(
        self,
        user_id: int,
        name: str,
        occurred_at,
        on_diet: bool,
        description: str = None,
    ) -> Meal:
        """Insert a meal owned by user_id"""
        meal = Meal(
            user_id=user_id,
            name=name,
            description=description,
            occurred_at=occurred_at,
            on_diet=on_diet,
        )
        return self.create(meal)

    def replace_fields(self, meal: Meal, **fields) -> Meal:
        """Overwrite the editable fields of a loaded meal and commit"""
        for key in ("name", "description", "occurred_at", "on_diet"):
            setattr(meal, key, fields.get(key))
        return self.update(meal)

