"""
Meal metrics: totals and the best streak of consecutive on-diet meals.

The streak is order sensitive. Callers pass meals in the order the meal
repository returns them, newest ``date`` first, so "consecutive" means
adjacent in reverse-chronological order.
"""

from typing import Any, Iterable
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.schemas.meal_schemas import MealMetrics
from repositories import MealRepository

logger = logging.getLogger("dailydiet.metrics")


def compute_meal_metrics(meals: Iterable[Any]) -> MealMetrics:
    """
    Single pass over ``meals`` (anything with an ``is_on_diet`` attribute).

    Totals and streak come from the same snapshot, so
    total_meals == total_meals_on_diet + total_meals_not_on_diet.
    """
    total = on_diet = 0
    current_streak = best_streak = 0

    for meal in meals:
        total += 1
        if meal.is_on_diet:
            on_diet += 1
            current_streak += 1
            best_streak = max(best_streak, current_streak)
        else:
            current_streak = 0

    return MealMetrics(
        total_meals=total,
        total_meals_on_diet=on_diet,
        total_meals_not_on_diet=total - on_diet,
        best_healthy_streak=best_streak,
    )


class MetricsService:
    @staticmethod
    def get_metrics(db: Session, user_id: UUID) -> MealMetrics:
        """Compute metrics over every meal of the user, newest first."""
        meals = MealRepository(db).list_by_user(user_id)
        metrics = compute_meal_metrics(meals)
        logger.info(
            f"metrics_computed user_id={user_id} total={metrics.total_meals} "
            f"best_streak={metrics.best_healthy_streak}"
        )
        return metrics
