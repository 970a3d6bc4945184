"""User registration routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from app.config import settings
from domain.schemas.user_schemas import UserCreate
from services.session_service import SessionService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dailydiet.api.users")


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a user and hand back its session token as a cookie."""
    new_user = SessionService.register_user(db, user.name, user.email)

    response = Response(status_code=status.HTTP_201_CREATED)
    response.set_cookie(
        settings.session_cookie_name,
        new_user.session_id,
        path="/",
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    logger.info(f"session_cookie_issued user_id={new_user.id}")
    return response
