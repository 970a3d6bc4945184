"""
User-related database models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class AppUser(Base):
    """Registered user. The session token doubles as the bearer credential."""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    session_id = Column(Text, unique=True, nullable=False, index=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    # Relationships
    meals = relationship("Meal", back_populates="user", cascade="all, delete-orphan")
