"""Base repository with dependency injection pattern."""

from typing import Any, Generic, TypeVar

from sqlalchemy import inspect
from sqlmodel import Session, SQLModel, func, select

from core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """Base repository with dependency injection pattern."""

    def __init__(self, model: type[T], db: Session) -> None:
        self.model = model
        self.db = db

    def _primary_key(self) -> Any:
        """Return the primary key column of the model."""
        return inspect(self.model).primary_key[0]

    def create(self, obj: T) -> T:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            logger.debug(f"Created {obj.model_dump()}")
        except Exception as exc:
            self.db.rollback()
            logger.error(f"Failed to create {obj.model_dump()}: {exc}")
            raise

        return obj

    def get_by_id(self, obj_id: Any) -> T | None:
        statement = select(self.model).where(self._primary_key() == obj_id)
        return self.db.exec(statement).first()

    def update(self, obj: T) -> T:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        except Exception as exc:
            self.db.rollback()
            logger.error(f"Failed to update {obj.model_dump()}: {exc}")
            raise

        return obj

    def delete(self, obj_id: Any) -> bool:
        """Delete an object by ID."""
        obj = self.get_by_id(obj_id)
        if obj is None:
            return False

        self.db.delete(obj)
        self.db.commit()
        return True

    def count(self) -> int:
        """Count all objects."""
        statement = select(func.count()).select_from(self.model)
        return self.db.exec(statement).one()
