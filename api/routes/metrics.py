"""Diet adherence metrics route"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user_id
from api.responses import UNAUTHORIZED
from domain.schemas.meal_schemas import MealMetrics
from services.metrics_service import MetricsService

router = APIRouter(prefix="/metrics", tags=["Metrics"])
logger = logging.getLogger("dailydiet.api.metrics")


@router.get("", response_model=MealMetrics, responses=UNAUTHORIZED)
def get_metrics(
    user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """
    Adherence summary for the authenticated user.

    Returns total meals, meals on and off the diet, and the longest run of
    consecutive on-diet meals in the order they were logged.
    """
    return MetricsService.get_metrics(db, user_id)
