"""
Note Service.

Business logic layer for notes. Orchestrates the repository,
translates storage errors, and logs operations.
"""

from sqlalchemy.orm import Session

from cerebra.backend.models.note import Note
from cerebra.backend.repositories.note import NoteRepository
from cerebra.backend.schemas.note import NoteCreate, NoteUpdate
from cerebra.backend.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Handles note creation, updates, and retrieval with
    proper validation and error handling.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)

    def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new note.

        Args:
            data: Note creation data

        Returns:
            Created note

        Raises:
            DatabaseError: If folder_id does not reference a folder
        """
        self._log_operation("Creating note", title=data.title, folder_id=data.folder_id)

        note = self._execute_db_operation(
            "create_note",
            self.repo.create_note,
            title=data.title,
            folder_id=data.folder_id,
            content=data.content,
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    def get_note(self, note_id: int) -> Note | None:
        """Get a note by ID, or None."""
        return self._execute_db_operation("get_note", self.repo.get_by_id, note_id)

    def list_notes(self, folder_id: int) -> list[Note]:
        """
        List the notes in a folder, most recently edited first.

        Args:
            folder_id: Owning folder ID

        Returns:
            List of notes
        """
        return self._execute_db_operation("list_notes", self.repo.list_by_folder, folder_id)

    def update_note(self, note_id: int, data: NoteUpdate) -> Note | None:
        """
        Update an existing note.

        Args:
            note_id: Note ID to update
            data: Update data (only fields that were passed are updated)

        Returns:
            Updated note, or None if it does not exist
        """
        changes = data.changes()

        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=list(changes.keys()),
        )

        note = self._execute_db_operation(
            "update_note",
            self.repo.update,
            note_id,
            **changes,
        )

        if note is None:
            self._log_debug("Note to update not found", note_id=note_id)
        return note

    def delete_note(self, note_id: int) -> bool:
        """
        Delete a note.

        Returns:
            True if the note existed and was deleted
        """
        self._log_operation("Deleting note", note_id=note_id)

        return self._execute_db_operation(
            "delete_note",
            self.repo.delete,
            note_id,
        )

    def search_notes(self, query: str) -> list[Note]:
        """
        Search notes by title or content.

        Args:
            query: Search query (case-insensitive substring)

        Returns:
            List of matching notes
        """
        self._log_debug("Searching notes", query=query)
        return self._execute_db_operation("search_notes", self.repo.search, query)
