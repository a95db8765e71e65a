"""
Sticky Note Repository.

Data access layer for sticky notes. Sticky notes are global, so there
is no folder filter and no cascade.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from cerebra.backend.models.sticky_note import DEFAULT_STICKY_TITLE, StickyNote
from cerebra.backend.repositories.base import BaseRepository


class StickyNoteRepository(BaseRepository[StickyNote]):
    """Repository for StickyNote model."""

    model = StickyNote

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def list_all(self) -> list[StickyNote]:
        """Get every sticky note, most recently edited first."""
        result = self.session.execute(
            select(StickyNote).order_by(
                StickyNote.modified_at.desc(), StickyNote.id.desc()
            )
        )
        return list(result.scalars().all())

    def create_sticky(self, content: str, title: str | None = None) -> StickyNote:
        """
        Create a sticky note.

        The "Quick Note" title default is applied here rather than left
        to the column default, so it holds whatever the store does.
        """
        return self.create(
            title=title if title is not None else DEFAULT_STICKY_TITLE,
            content=content,
        )
