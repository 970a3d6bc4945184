"""
User Repository - Data access layer for users and their session tokens
"""

from typing import Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import AppUser


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_session_id(self, session_id: str) -> Optional[AppUser]:
        """Get the user holding a session token"""
        return self.db.query(AppUser).filter(AppUser.session_id == session_id).first()

    def create_user(self, name: str, email: str, session_id: str) -> AppUser:
        """Create a new user bound to a session token"""
        return self.add(AppUser(name=name, email=email, session_id=session_id))
