"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCreate
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealMetrics,
)

__all__ = [
    # User schemas
    "UserCreate",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealListResponse",
    "MealDetailResponse",
    "MealMetrics",
]
