"""
Setting Schemas.

The settings table stores strings only. Preferences is the typed view
a caller works with; keys use the stored camelCase names as aliases.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

FontSize = Literal["small", "medium", "large"]
Theme = Literal["light", "dark"]


class SettingWrite(BaseModel):
    """Schema for writing one setting."""

    key: str = Field(..., min_length=1, description="Setting name")
    value: str = Field(..., description="Setting value, always a string")


class Preferences(BaseModel):
    """Typed application preferences built from the raw settings map."""

    app_name: str = Field(default="CEREBRA", alias="appName")
    confirm_delete: bool = Field(default=True, alias="confirmDelete")
    font_size: FontSize = Field(default="medium", alias="fontSize")
    animations: bool = Field(default=True, alias="animations")
    theme: Theme = Field(default="light", alias="theme")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_settings(cls, values: dict[str, str]) -> "Preferences":
        """
        Coerce stored strings into typed preferences.

        "true"/"false" become booleans. A stored value that does not fit
        its field (e.g. theme="blue") falls back to the default for that
        field instead of failing the whole load.
        """
        try:
            return cls.model_validate(values)
        except PydanticValidationError as e:
            invalid = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
            usable = {key: value for key, value in values.items() if key not in invalid}
            return cls.model_validate(usable)
