"""
Generic repository over a SQLAlchemy session.

Mutations commit immediately; callers translate the ``IntegrityError`` of a
failed commit into a domain error.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database import Base
from ..core.logging_config import get_logger

EntityType = TypeVar("EntityType", bound=Base)

logger = get_logger(__name__)


class Repository(Generic[EntityType]):
    """Base repository with the CRUD operations shared by every entity"""

    def __init__(self, db: Session, model: Type[EntityType]) -> None:
        self.db = db
        self.model = model

    def get_all(
        self,
        *criteria: Any,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order_by: Any = None,
    ) -> List[EntityType]:
        query = self.db.query(self.model)
        if criteria:
            query = query.filter(*criteria)
        if order_by is not None:
            query = query.order_by(order_by)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def get(self, *criteria: Any) -> Optional[EntityType]:
        return self.db.query(self.model).filter(*criteria).first()

    def exists(self, *criteria: Any) -> bool:
        return self.get(*criteria) is not None

    def create(self, entity: EntityType) -> EntityType:
        self.db.add(entity)
        self.save()
        self.db.refresh(entity)
        return entity

    def remove(self, entity: EntityType) -> None:
        self.db.delete(entity)
        self.save()

    def save(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Integrity error while saving {self.model.__name__}")
            raise
