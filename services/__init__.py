"""Services package - Business logic layer"""

from services.session_service import SessionService, SessionResult
from services.meal_service import MealService
from services.metrics_service import MetricsService, compute_meal_metrics

__all__ = [
    "SessionService",
    "SessionResult",
    "MealService",
    "MetricsService",
    "compute_meal_metrics",
]
