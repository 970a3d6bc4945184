from pydantic import BaseModel, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime, timezone
from uuid import UUID


class MealCreate(BaseModel):
    """Schema for logging a new meal"""

    name: str = Field(..., min_length=1, description="Meal name")
    description: str = Field(..., description="Free-text description")
    is_on_diet: StrictBool = Field(
        ..., alias="isOnDiet", description="Whether the meal fits the diet"
    )
    date: datetime = Field(
        ..., description="When the meal was eaten (ISO-8601 or epoch timestamp)"
    )

    model_config = {"populate_by_name": True}

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        """Meal dates are stored as naive UTC; aware values are converted first."""
        if v.tzinfo is None:
            return v
        try:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError as exc:
            raise ValueError("date is out of range once converted to UTC") from exc


class MealUpdate(MealCreate):
    """Schema for overwriting an existing meal (same shape as create)"""


class MealResponse(BaseModel):
    """Schema for a stored meal"""

    id: UUID
    user_id: UUID
    name: str
    description: str
    is_on_diet: bool
    date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MealListResponse(BaseModel):
    """Meals of the current user, most recent first"""

    meals: List[MealResponse]


class MealDetailResponse(BaseModel):
    meal: MealResponse


class MealMetrics(BaseModel):
    """Aggregate counts and best on-diet streak, serialized in camelCase"""

    total_meals: int = 0
    total_meals_on_diet: int = 0
    total_meals_not_on_diet: int = 0
    best_healthy_streak: int = 0

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
