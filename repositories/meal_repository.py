"""
Meal Repository - Data access layer for meal records.

Every query here is scoped by the owning user; there is no lookup by meal id alone.
"""

from typing import List, Optional
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_owned(self, meal_id: UUID, user_id: UUID) -> Optional[Meal]:
        """Get a meal only if it belongs to the given user"""
        return (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def list_by_user(self, user_id: UUID) -> List[Meal]:
        """
        Get all meals of a user, most recent first.

        Ties on ``date`` fall back to insertion time and then id so the order
        (and therefore the streak metric) is stable between calls.
        """
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.date.desc(), Meal.created_at.desc(), Meal.id.desc())
            .all()
        )

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        description: str,
        is_on_diet: bool,
        date: datetime,
    ) -> Meal:
        """Create a new meal for a user"""
        meal = Meal(
            user_id=user_id,
            name=name,
            description=description,
            is_on_diet=is_on_diet,
            date=date,
        )
        return self.add(meal)

    def update_meal(
        self,
        meal: Meal,
        name: str,
        description: str,
        is_on_diet: bool,
        date: datetime,
    ) -> Meal:
        """Overwrite every editable field of a meal"""
        meal.name = name
        meal.description = description
        meal.is_on_diet = is_on_diet
        meal.date = date
        return self.save(meal)

    def delete_owned(self, meal_id: UUID, user_id: UUID) -> bool:
        """Delete a meal if it belongs to the given user"""
        meal = self.get_owned(meal_id, user_id)
        if meal is None:
            return False
        self.remove(meal)
        return True
