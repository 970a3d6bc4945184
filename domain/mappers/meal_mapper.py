"""
Meal domain mappers.
Handles transformation between ORM models and DTOs for meal entities.
"""

from typing import Iterable
from domain.models import Meal
from domain.schemas.meal_schemas import (
    MealResponse,
    MealListResponse,
    MealDetailResponse,
)


class MealMapper:
    """Mapper for meal-related transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        """
        Convert Meal ORM model to MealResponse DTO.

        Args:
            meal: Meal ORM instance (or any object with the same attributes)

        Returns:
            MealResponse DTO
        """
        return MealResponse(
            id=meal.id,
            user_id=meal.user_id,
            name=meal.name,
            description=meal.description,
            is_on_diet=meal.is_on_diet,
            date=meal.date,
            created_at=meal.created_at,
            updated_at=meal.updated_at,
        )

    @staticmethod
    def to_detail(meal: Meal) -> MealDetailResponse:
        return MealDetailResponse(meal=MealMapper.to_response(meal))

    @staticmethod
    def to_list(meals: Iterable[Meal]) -> MealListResponse:
        return MealListResponse(meals=[MealMapper.to_response(m) for m in meals])
