"""
Base Repository.

Base class for all repositories with common CRUD operations.

Missing rows are an expected outcome here, never an exception:
lookups return None and deletes return False.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from cerebra.backend.core.logging import get_logger
from cerebra.backend.models.base import Base, utc_now

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Subclasses should set the model class:

        class FolderRepository(BaseRepository[Folder]):
            model = Folder

    Every write flushes and then refreshes the instance, so the returned
    object is what the store holds (generated id, server defaults), not
    what was passed in.
    """

    model: type[ModelType]

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, id: int) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        result = self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    def create(self, **kwargs: Any) -> ModelType:
        """Create a new record with both timestamps set to now."""
        now = utc_now()
        instance = self.model(created_at=now, modified_at=now, **kwargs)
        self.session.add(instance)
        self.session.flush()
        self.session.refresh(instance)
        return instance

    def update(self, id: int, **kwargs: Any) -> ModelType | None:
        """
        Update an existing record.

        Only the given fields change. modified_at is bumped even when
        no field is given or the values are unchanged.

        Returns:
            The refreshed record, or None if it does not exist
        """
        instance = self.get_by_id(id)
        if instance is None:
            return None

        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        instance.modified_at = utc_now()

        self.session.flush()
        self.session.refresh(instance)
        return instance

    def delete(self, id: int) -> bool:
        """
        Delete a record by ID.

        Issued as a single DELETE so that rows depending on it are
        removed by the declared ON DELETE CASCADE, not by the ORM.

        Returns:
            True if a row was removed
        """
        result = self.session.execute(
            delete(self.model)
            .where(self.model.id == id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    def exists(self, id: int) -> bool:
        """Check if a record exists by ID."""
        result = self.session.execute(
            select(self.model.id).where(self.model.id == id)
        )
        return result.scalar_one_or_none() is not None
