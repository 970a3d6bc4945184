"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Cookie, Depends
from sqlalchemy.orm import Session
import logging

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import AppUser, get_db_session
from services.session_service import SessionService

logger = logging.getLogger("dailydiet.api.auth")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user(
    session_id: Optional[str] = Cookie(
        default=None, alias=settings.session_cookie_name
    ),
    db: Session = Depends(get_db),
) -> AppUser:
    """Resolve the session cookie to a user or reject the request with 401."""
    result = SessionService.resolve_session(db, session_id)
    if not result.authenticated:
        logger.info(f"unauthorized reason={result.failure.value}")
        raise UnauthorizedError()
    return result.user
