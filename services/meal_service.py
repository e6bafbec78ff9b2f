from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository, UserRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("dailydiet.meals")


def _meal_not_found(meal_id: int) -> NotFoundError:
    # Same error whether the meal is missing or owned by someone else
    return NotFoundError(f"Meal {meal_id} not found", code="MEAL_NOT_FOUND")


class MealService:
    """Owner-scoped business logic for the meal log"""

    @staticmethod
    def _validated_fields(meal_data: MealCreate) -> dict:
        """
        Check incoming meal fields and return them unchanged.

        The pydantic schema rejects missing or mistyped fields at the HTTP
        boundary; this covers callers that build schemas with model_construct
        or pass partially filled objects. Text is stored exactly as given.
        """
        fields = {
            key: getattr(meal_data, key, None)
            for key in ("name", "description", "occurred_at", "on_diet")
        }

        name = fields.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ServiceValidationError(
                "Meal name is required", details={"field": "name"}
            )
        if fields.get("occurred_at") is None:
            raise ServiceValidationError(
                "Meal date/time is required", details={"field": "occurred_at"}
            )
        if not isinstance(fields.get("on_diet"), bool):
            raise ServiceValidationError(
                "on_diet must be true or false", details={"field": "on_diet"}
            )

        return {
            "name": name,
            "description": fields.get("description"),
            "occurred_at": fields["occurred_at"],
            "on_diet": fields["on_diet"],
        }

    @staticmethod
    def create_meal(db: Session, user_id: int, meal_data: MealCreate) -> Meal:
        """Log a meal for user_id"""
        fields = MealService._validated_fields(meal_data)

        # Tokens outlive a deleted account; never create a meal without an owner
        if UserRepository(db).get_by_id(user_id) is None:
            logger.warning(f"create_meal failed: user {user_id} not found")
            raise NotFoundError(f"User {user_id} not found")

        meal = MealRepository(db).create_meal(user_id=user_id, **fields)
        logger.info(
            f"meal_created meal_id={meal.meal_id} user_id={user_id} "
            f"on_diet={meal.on_diet}"
        )
        return meal

    @staticmethod
    def list_meals(db: Session, user_id: int) -> List[Meal]:
        """All meals of user_id in the order they were logged"""
        return MealRepository(db).list_for_user(user_id)

    @staticmethod
    def get_meal(db: Session, user_id: int, meal_id: int) -> Meal:
        meal = MealRepository(db).get_for_user(user_id, meal_id)
        if meal is None:
            logger.warning(f"meal_not_found meal_id={meal_id} user_id={user_id}")
            raise _meal_not_found(meal_id)
        return meal

    @staticmethod
    def update_meal(
        db: Session, user_id: int, meal_id: int, meal_data: MealUpdate
    ) -> Meal:
        """Replace every editable field of one of the user's meals"""
        fields = MealService._validated_fields(meal_data)
        meal_repo = MealRepository(db)

        meal = meal_repo.get_for_user(user_id, meal_id)
        if meal is None:
            logger.warning(f"meal_not_found meal_id={meal_id} user_id={user_id}")
            raise _meal_not_found(meal_id)

        meal = meal_repo.replace_fields(meal, **fields)
        logger.info(f"meal_updated meal_id={meal_id} user_id={user_id}")
        return meal

    @staticmethod
    def delete_meal(db: Session, user_id: int, meal_id: int) -> None:
        """
        Delete one of the user's meals.

        Deleting a meal that is already gone raises NotFoundError; callers
        wanting idempotent deletes should treat that as nothing to do.
        """
        meal_repo = MealRepository(db)
        meal = meal_repo.get_for_user(user_id, meal_id)
        if meal is None:
            logger.warning(f"meal_not_found meal_id={meal_id} user_id={user_id}")
            raise _meal_not_found(meal_id)

        meal_repo.delete(meal)
        logger.info(f"meal_deleted meal_id={meal_id} user_id={user_id}")
