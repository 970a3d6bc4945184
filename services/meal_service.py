from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.meals")

MEAL_NOT_FOUND = "Meal not found"


class MealService:
    """Business logic for a user's meal log. Every call is scoped to ``user_id``."""

    @staticmethod
    def create_meal(db: Session, user_id: UUID, data: MealCreate) -> Meal:
        meal = MealRepository(db).create_meal(
            user_id=user_id,
            name=data.name,
            description=data.description,
            is_on_diet=data.is_on_diet,
            date=data.date,
        )
        logger.info(
            f"meal_created user_id={user_id} meal_id={meal.id} "
            f"is_on_diet={meal.is_on_diet}"
        )
        return meal

    @staticmethod
    def list_meals(db: Session, user_id: UUID) -> List[Meal]:
        """Return the user's meals ordered by date, most recent first."""
        return MealRepository(db).list_by_user(user_id)

    @staticmethod
    def get_meal(db: Session, user_id: UUID, meal_id: UUID) -> Meal:
        meal = MealRepository(db).get_owned(meal_id, user_id)
        if meal is None:
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(MEAL_NOT_FOUND)
        return meal

    @staticmethod
    def update_meal(
        db: Session, user_id: UUID, meal_id: UUID, data: MealUpdate
    ) -> Meal:
        """
        Overwrite name, description, flag and date of an owned meal.

        Raises:
            NotFoundError: If the meal does not exist or belongs to another user
        """
        repo = MealRepository(db)
        meal = MealService.get_meal(db, user_id, meal_id)
        meal = repo.update_meal(
            meal,
            name=data.name,
            description=data.description,
            is_on_diet=data.is_on_diet,
            date=data.date,
        )
        logger.info(f"meal_updated user_id={user_id} meal_id={meal_id}")
        return meal

    @staticmethod
    def delete_meal(db: Session, user_id: UUID, meal_id: UUID) -> None:
        if not MealRepository(db).delete_owned(meal_id, user_id):
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(MEAL_NOT_FOUND)
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id}")
