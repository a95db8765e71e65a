"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from cerebra.backend.models.note import Note
from cerebra.backend.repositories.base import BaseRepository

LIKE_ESCAPE = "\\"


def escape_like(query: str) -> str:
    """Escape LIKE wildcards so the query matches as a literal substring."""
    return (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits standard CRUD operations from BaseRepository
    and adds note-specific queries.
    """

    model = Note

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def create_note(
        self,
        title: str,
        folder_id: int,
        content: str | None = None,
    ) -> Note:
        """
        Create a note in a folder.

        Omitted content is stored as "" (never NULL). A folder_id that
        does not exist fails the foreign key and raises IntegrityError.
        """
        return self.create(
            title=title,
            content=content if content is not None else "",
            folder_id=folder_id,
        )

    def list_by_folder(self, folder_id: int) -> list[Note]:
        """
        Get the notes owned by a folder, most recently edited first.

        Args:
            folder_id: Owning folder ID

        Returns:
            List of notes (empty if the folder has none or does not exist)
        """
        result = self.session.execute(
            select(Note)
            .where(Note.folder_id == folder_id)
            .order_by(Note.modified_at.desc(), Note.id.desc())
        )
        return list(result.scalars().all())

    def search(self, query: str) -> list[Note]:
        """
        Search notes by title or content (case-insensitive substring).

        Scans every note regardless of folder: a leading wildcard cannot
        use the title index. Each matching note is returned once.

        Args:
            query: Text to look for

        Returns:
            Matching notes, most recently edited first
        """
        pattern = f"%{escape_like(query)}%"
        result = self.session.execute(
            select(Note)
            .where(
                or_(
                    Note.title.ilike(pattern, escape=LIKE_ESCAPE),
                    Note.content.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
            .order_by(Note.modified_at.desc(), Note.id.desc())
        )
        return list(result.scalars().all())
