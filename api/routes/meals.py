"""Meal log routes. Every route is scoped to the authenticated user."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging

from api.dependencies import get_db, get_current_user_id
from api.responses import StatusResponse, BAD_REQUEST, NOT_FOUND, UNAUTHORIZED
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"], responses=UNAUTHORIZED)
logger = logging.getLogger("dailydiet.api.meals")


@router.post(
    "",
    response_model=MealResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
def create_meal(
    meal: MealCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Log a meal for the authenticated user."""
    return MealService.create_meal(db, user_id, meal)


@router.get("", response_model=List[MealResponse])
def list_meals(
    user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """All meals of the authenticated user, oldest first."""
    return MealService.list_meals(db, user_id)


@router.get("/{meal_id}", response_model=MealResponse, responses=NOT_FOUND)
def get_meal(
    meal_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """A single meal. Meals of other users are reported as not found."""
    return MealService.get_meal(db, user_id, meal_id)


@router.put(
    "/{meal_id}", response_model=MealResponse, responses={**NOT_FOUND, **BAD_REQUEST}
)
def update_meal(
    meal_id: int,
    meal: MealUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Replace all editable fields of a meal."""
    return MealService.update_meal(db, user_id, meal_id, meal)


@router.delete("/{meal_id}", response_model=StatusResponse, responses=NOT_FOUND)
def delete_meal(
    meal_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a meal. A second delete of the same id returns 404."""
    MealService.delete_meal(db, user_id, meal_id)
    return StatusResponse(deleted=meal_id)
