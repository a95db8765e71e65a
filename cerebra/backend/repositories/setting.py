"""
Setting Repository.

Data access layer for the key-value settings table. Settings are
keyed by name rather than integer id, so this repository does not
inherit the id-based CRUD of BaseRepository.
"""

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.orm import Session

from cerebra.backend.models.setting import Setting


class SettingRepository:
    """Repository for Setting model."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> str | None:
        """
        Get a setting value.

        Returns:
            The stored string, or None if the key was never written
            (distinct from an empty-string value)
        """
        result = self.session.execute(
            select(Setting.value).where(Setting.key == key)
        )
        return result.scalar_one_or_none()

    def set(self, key: str, value: str) -> None:
        """Insert the key or overwrite its value, in one statement."""
        stmt = insert(Setting).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Setting.key],
            set_={"value": stmt.excluded.value},
        )
        self.session.execute(stmt)
        self.session.flush()

    def get_all(self) -> dict[str, str]:
        """Get every setting as a flat mapping."""
        result = self.session.execute(select(Setting.key, Setting.value))
        return {row.key: row.value for row in result}
