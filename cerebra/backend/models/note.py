"""
Note Model.

Free text content owned by exactly one folder.
"""

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from cerebra.backend.models.base import Base, IntegerIdMixin, TimestampMixin


class Note(IntegerIdMixin, TimestampMixin, Base):
    """
    Note database model.

    folder_id is required: a note cannot outlive its folder.
    content is never NULL; an empty note stores "".
    """

    __tablename__ = "notes"
    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
        Index("idx_notes_title", "title"),
        {"sqlite_autoincrement": True},
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default="",
    )
    folder_id: Mapped[int] = mapped_column(
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, folder_id={self.folder_id})>"


# Default listing order is most recently edited first
Index("idx_notes_modified_at", Note.modified_at.desc())
