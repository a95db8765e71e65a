"""
Sticky Note Model.

Quick notes that belong to no folder.
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from cerebra.backend.models.base import Base, IntegerIdMixin, TimestampMixin

DEFAULT_STICKY_TITLE = "Quick Note"


class StickyNote(IntegerIdMixin, TimestampMixin, Base):
    """Sticky note database model. Content is required, title is not."""

    __tablename__ = "sticky_notes"
    __table_args__ = {"sqlite_autoincrement": True}

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=DEFAULT_STICKY_TITLE,
        server_default=DEFAULT_STICKY_TITLE,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<StickyNote(id={self.id}, title={self.title!r})>"
