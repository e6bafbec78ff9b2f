from pydantic import BaseModel, Field, StrictBool, field_validator
from typing import Optional
from datetime import datetime


class MealCreate(BaseModel):
    """Schema for logging a meal"""

    name: str = Field(..., min_length=1, max_length=120, description="Short label")
    description: Optional[str] = Field(None, description="Optional free text")
    occurred_at: datetime = Field(..., description="When the meal was eaten")
    on_diet: StrictBool = Field(..., description="Whether the meal is diet-compliant")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class MealUpdate(MealCreate):
    """Full replacement of a meal's editable fields (PUT semantics)"""


class MealResponse(BaseModel):
    meal_id: int
    user_id: int
    name: str
    description: Optional[str]
    occurred_at: datetime
    on_diet: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MealMetrics(BaseModel):
    """Diet adherence summary over a user's meals"""

    total: int = Field(..., ge=0, description="Number of meals logged")
    inside: int = Field(..., ge=0, description="Meals on the diet")
    outside: int = Field(..., ge=0, description="Meals off the diet")
    best_streak: int = Field(
        ..., ge=0, description="Longest run of consecutive on-diet meals"
    )
