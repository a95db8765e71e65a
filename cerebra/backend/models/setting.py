"""
Setting Model.

Flat key-value store for preferences. Every value is a string at this
layer; typed views live in schemas.setting.
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from cerebra.backend.models.base import Base


class Setting(Base):
    """One preference value, keyed by name."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Setting(key={self.key!r}, value={self.value!r})>"
