"""
Registration and session lookup.

The session token is an opaque UUID string stored on the user row and handed
to the client as a cookie. Resolving it is an explicit call that returns a
result value instead of mutating request state.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from domain.enums import SessionFailureReason
from domain.models import AppUser
from repositories import UserRepository

logger = logging.getLogger("dailydiet.session")


@dataclass(frozen=True)
class SessionResult:
    """Outcome of resolving a session token: either a user or a failure reason."""

    user: Optional[AppUser] = None
    failure: Optional[SessionFailureReason] = None

    @property
    def authenticated(self) -> bool:
        return self.user is not None


class SessionService:
    @staticmethod
    def new_session_id() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def register_user(db: Session, name: str, email: str) -> AppUser:
        """Create a user with a freshly generated session token."""
        user = UserRepository(db).create_user(
            name=name, email=email, session_id=SessionService.new_session_id()
        )
        logger.info(f"user_registered user_id={user.id}")
        return user

    @staticmethod
    def resolve_session(db: Session, session_id: Optional[str]) -> SessionResult:
        """Look up the user owning ``session_id``."""
        if not session_id:
            return SessionResult(failure=SessionFailureReason.MISSING)

        user = UserRepository(db).get_by_session_id(session_id)
        if user is None:
            logger.warning("session_rejected reason=unknown")
            return SessionResult(failure=SessionFailureReason.UNKNOWN)
        return SessionResult(user=user)
