"""
Folder Service.

Business logic layer for folders: create, rename, move, delete and
per-folder item counts.
"""

from sqlalchemy.orm import Session

from cerebra.backend.core.exceptions import ValidationError
from cerebra.backend.models.folder import Folder
from cerebra.backend.repositories.folder import FolderRepository
from cerebra.backend.schemas.folder import FolderCreate, FolderUpdate
from cerebra.backend.services.base import BaseService


class FolderService(BaseService):
    """
    Service for folder business logic.

    Not-found is reported as None (get/update) or False (delete).
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.repo = FolderRepository(session)

    def list_folders(self) -> list[Folder]:
        """List every folder, ordered by name."""
        return self._execute_db_operation("list_folders", self.repo.list_all)

    def get_folder(self, folder_id: int) -> Folder | None:
        """Get a folder by ID, or None."""
        return self._execute_db_operation("get_folder", self.repo.get_by_id, folder_id)

    def create_folder(self, data: FolderCreate) -> Folder:
        """
        Create a new folder.

        Raises:
            DatabaseError: If parent_id does not reference a folder
        """
        self._log_operation("Creating folder", name=data.name, parent_id=data.parent_id)

        folder = self._execute_db_operation(
            "create_folder",
            self.repo.create,
            name=data.name,
            parent_id=data.parent_id,
        )

        self._log_debug("Folder created", folder_id=folder.id)
        return folder

    def update_folder(self, folder_id: int, data: FolderUpdate) -> Folder | None:
        """
        Rename and/or move a folder.

        modified_at is bumped even if nothing changes.

        Returns:
            Updated folder, or None if it does not exist

        Raises:
            ValidationError: If the move would put the folder inside itself
            DatabaseError: If the new parent does not exist
        """
        changes = data.changes()

        if not self._execute_db_operation("update_folder", self.repo.exists, folder_id):
            self._log_debug("Folder to update not found", folder_id=folder_id)
            return None

        new_parent = changes.get("parent_id")
        if new_parent is not None:
            self._check_not_descendant(folder_id, new_parent)

        self._log_operation(
            "Updating folder",
            folder_id=folder_id,
            fields=list(changes.keys()),
        )

        return self._execute_db_operation(
            "update_folder",
            self.repo.update,
            folder_id,
            **changes,
        )

    def delete_folder(self, folder_id: int) -> bool:
        """
        Delete a folder together with its subfolders and their notes.

        Returns:
            True if the folder existed and was deleted
        """
        self._log_operation("Deleting folder", folder_id=folder_id)

        deleted = self._execute_db_operation(
            "delete_folder",
            self.repo.delete,
            folder_id,
        )

        if not deleted:
            self._log_debug("Folder to delete not found", folder_id=folder_id)
        return deleted

    def get_item_counts(self) -> dict[int, int]:
        """Direct notes plus direct subfolders, per folder ID."""
        return self._execute_db_operation("get_item_counts", self.repo.item_counts)

    def _check_not_descendant(self, folder_id: int, new_parent_id: int) -> None:
        """Reject moving a folder under itself or anything below it."""
        descendants = self._execute_db_operation(
            "update_folder", self.repo.descendant_ids, folder_id,
        )
        if new_parent_id == folder_id or new_parent_id in descendants:
            raise ValidationError(
                "Folder cannot be moved into itself or one of its subfolders",
                details={"folder_id": folder_id, "parent_id": new_parent_id},
            )
