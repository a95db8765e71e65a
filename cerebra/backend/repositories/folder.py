"""
Folder Repository.

Data access layer for folders, including the per-folder item counts
and subtree lookups used when moving folders.
"""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from cerebra.backend.models.folder import Folder
from cerebra.backend.models.note import Note
from cerebra.backend.repositories.base import BaseRepository


class FolderRepository(BaseRepository[Folder]):
    """
    Repository for Folder model.

    Inherits standard CRUD operations from BaseRepository. Deleting a
    folder relies on the store's cascade to remove its subtree and notes.
    """

    model = Folder

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def list_all(self) -> list[Folder]:
        """
        Get every folder, ordered by name.

        Callers derive root-only or children-of-X views from this list.
        """
        result = self.session.execute(
            select(Folder).order_by(Folder.name.asc(), Folder.id.asc())
        )
        return list(result.scalars().all())

    def item_counts(self) -> dict[int, int]:
        """
        Count direct notes plus direct child folders for every folder.

        Not recursive. Computed in one query with correlated subqueries.

        Returns:
            Mapping of folder id to item count
        """
        note_count = (
            select(func.count(Note.id))
            .where(Note.folder_id == Folder.id)
            .correlate(Folder)
            .scalar_subquery()
        )
        child_folders = Folder.__table__.alias("child_folders")
        folder_count = (
            select(func.count(child_folders.c.id))
            .where(child_folders.c.parent_id == Folder.id)
            .correlate(Folder)
            .scalar_subquery()
        )

        result = self.session.execute(
            select(Folder.id, (note_count + folder_count).label("item_count"))
        )
        return {row.id: row.item_count for row in result}

    def descendant_ids(self, id: int) -> set[int]:
        """
        Get the ids of every folder below the given one, at any depth.

        Uses a recursive CTE; the starting folder itself is not included.
        UNION rather than UNION ALL so a corrupted cyclic tree still terminates.
        """
        tree = (
            select(Folder.id)
            .where(Folder.parent_id == id)
            .cte("descendants", recursive=True)
        )
        tree = tree.union(
            select(Folder.id).where(Folder.parent_id == tree.c.id)
        )
        result = self.session.execute(select(tree.c.id))
        return set(result.scalars().all())
