"""
Setting Service.

Business logic layer for preferences. Raw values are strings; the
typed Preferences view is built here for callers that want it.
"""

from sqlalchemy.orm import Session

from cerebra.backend.repositories.setting import SettingRepository
from cerebra.backend.schemas.setting import Preferences, SettingWrite
from cerebra.backend.services.base import BaseService


class SettingService(BaseService):
    """Service for settings. There is no delete: a known key stays known."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.repo = SettingRepository(session)

    def get_setting(self, key: str) -> str | None:
        """Get one value, or None if the key was never written."""
        return self._execute_db_operation("get_setting", self.repo.get, key)

    def set_setting(self, data: SettingWrite) -> None:
        """Create or overwrite a setting."""
        self._log_operation("Setting value", key=data.key)

        self._execute_db_operation(
            "set_setting",
            self.repo.set,
            data.key,
            data.value,
        )

    def get_all_settings(self) -> dict[str, str]:
        """Get every setting in one round trip."""
        return self._execute_db_operation("get_all_settings", self.repo.get_all)

    def get_preferences(self) -> Preferences:
        """Get the stored settings coerced into typed preferences."""
        return Preferences.from_settings(self.get_all_settings())
