"""
Meal log models.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Boolean,
    Index,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Meal(Base):
    """A single meal logged by its owner"""

    __tablename__ = "meals"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    is_on_diet = Column(Boolean, nullable=False)
    date = Column(TIMESTAMP, nullable=False)  # naive UTC
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    user = relationship("AppUser", back_populates="meals")

    __table_args__ = (Index("ix_meals_user_id_date", "user_id", "date"),)
