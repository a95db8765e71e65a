"""
Sticky Note Service.

Business logic layer for sticky notes.
"""

from sqlalchemy.orm import Session

from cerebra.backend.models.sticky_note import StickyNote
from cerebra.backend.repositories.sticky_note import StickyNoteRepository
from cerebra.backend.schemas.sticky_note import StickyNoteCreate, StickyNoteUpdate
from cerebra.backend.services.base import BaseService


class StickyNoteService(BaseService):
    """Service for sticky note business logic."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.repo = StickyNoteRepository(session)

    def list_sticky_notes(self) -> list[StickyNote]:
        """List every sticky note, most recently edited first."""
        return self._execute_db_operation("list_sticky_notes", self.repo.list_all)

    def get_sticky_note(self, sticky_id: int) -> StickyNote | None:
        """Get a sticky note by ID, or None."""
        return self._execute_db_operation(
            "get_sticky_note", self.repo.get_by_id, sticky_id,
        )

    def create_sticky_note(self, data: StickyNoteCreate) -> StickyNote:
        """Create a sticky note; the title defaults to "Quick Note"."""
        self._log_operation("Creating sticky note", title=data.title)

        sticky = self._execute_db_operation(
            "create_sticky_note",
            self.repo.create_sticky,
            content=data.content,
            title=data.title,
        )

        self._log_debug("Sticky note created", sticky_id=sticky.id)
        return sticky

    def update_sticky_note(
        self,
        sticky_id: int,
        data: StickyNoteUpdate,
    ) -> StickyNote | None:
        """
        Update a sticky note.

        Returns:
            Updated sticky note, or None if it does not exist
        """
        changes = data.changes()

        self._log_operation(
            "Updating sticky note",
            sticky_id=sticky_id,
            fields=list(changes.keys()),
        )

        return self._execute_db_operation(
            "update_sticky_note",
            self.repo.update,
            sticky_id,
            **changes,
        )

    def delete_sticky_note(self, sticky_id: int) -> bool:
        """Delete a sticky note. Returns True if it existed."""
        self._log_operation("Deleting sticky note", sticky_id=sticky_id)

        return self._execute_db_operation(
            "delete_sticky_note",
            self.repo.delete,
            sticky_id,
        )
