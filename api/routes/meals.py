"""Meal log routes. Every endpoint requires the session cookie."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from uuid import UUID

from api.dependencies import get_db, get_current_user
from domain.models import AppUser
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealListResponse,
    MealDetailResponse,
    MealMetrics,
)
from domain.mappers import MealMapper
from services import MealService, MetricsService

router = APIRouter(prefix="/meals", tags=["Meals"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    meal: MealCreate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    MealService.create_meal(db, user.id, meal)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=MealListResponse)
def list_meals(
    user: AppUser = Depends(get_current_user), db: Session = Depends(get_db)
):
    """List the caller's meals, most recent first."""
    return MealMapper.to_list(MealService.list_meals(db, user.id))


# Declared before /{meal_id} so "metrics" is not parsed as an id
@router.get("/metrics", response_model=MealMetrics)
def get_metrics(
    user: AppUser = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Totals and best on-diet streak over the caller's meals."""
    return MetricsService.get_metrics(db, user.id)


@router.get("/{meal_id}", response_model=MealDetailResponse)
def get_meal(
    meal_id: UUID,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return MealMapper.to_detail(MealService.get_meal(db, user.id, meal_id))


@router.put(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def update_meal(
    meal_id: UUID,
    meal: MealUpdate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Overwrite a meal. 404 when the meal is missing or not the caller's."""
    MealService.update_meal(db, user.id, meal_id, meal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_meal(
    meal_id: UUID,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    MealService.delete_meal(db, user.id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
