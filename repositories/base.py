"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, Type
from uuid import UUID
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing the persistence primitives shared by all repositories.
    Every model in this project uses ``id`` as its primary key.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        """Get entity by primary key"""
        return self.db.get(self.model, entity_id)

    def add(self, entity: ModelType) -> ModelType:
        """Persist a new entity and reload server-side defaults"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def save(self, entity: ModelType) -> ModelType:
        """Commit pending changes on an already tracked entity"""
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def remove(self, entity: ModelType) -> None:
        """Delete a tracked entity"""
        self.db.delete(entity)
        self.db.commit()
