"""
Folder Model.

A named node in a self-referencing tree. A null parent_id marks a
root-level folder.
"""

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from cerebra.backend.models.base import Base, IntegerIdMixin, TimestampMixin


class Folder(IntegerIdMixin, TimestampMixin, Base):
    """
    Folder database model.

    Deleting a folder removes its whole subtree and every note owned by
    any folder in it. Both cascades are declared on the foreign keys and
    carried out by SQLite, which only enforces them when the connection
    has PRAGMA foreign_keys=ON (see core.database).
    """

    __tablename__ = "folders"
    __table_args__ = (
        Index("idx_folders_parent_id", "parent_id"),
        {"sqlite_autoincrement": True},
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name={self.name!r}, parent_id={self.parent_id})>"
