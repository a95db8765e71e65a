"""
Unit Tests for Setting Service.
"""

import pytest

from cerebra.backend.schemas.setting import Preferences, SettingWrite
from cerebra.backend.services.setting import SettingService


@pytest.fixture
def service(db_session):
    return SettingService(db_session)


class TestSettingService:
    """Tests for raw settings access."""

    def test_set_then_get_all_keeps_defaults(self, service):
        service.set_setting(SettingWrite(key="theme", value="dark"))

        values = service.get_all_settings()

        assert values["theme"] == "dark"
        assert values["fontSize"] == "medium"
        assert values["appName"] == "CEREBRA"

    def test_get_setting(self, service):
        assert service.get_setting("confirmDelete") == "true"
        assert service.get_setting("missing") is None


class TestPreferences:
    """Tests for the typed preferences view."""

    def test_defaults(self, service):
        prefs = service.get_preferences()

        assert prefs == Preferences()
        assert prefs.confirm_delete is True
        assert prefs.font_size == "medium"

    def test_string_booleans_are_parsed(self, service):
        service.set_setting(SettingWrite(key="confirmDelete", value="false"))
        service.set_setting(SettingWrite(key="animations", value="false"))

        prefs = service.get_preferences()

        assert prefs.confirm_delete is False
        assert prefs.animations is False

    def test_invalid_value_falls_back_to_default(self, service):
        service.set_setting(SettingWrite(key="theme", value="blue"))
        service.set_setting(SettingWrite(key="fontSize", value="large"))

        prefs = service.get_preferences()

        assert prefs.theme == "light"
        assert prefs.font_size == "large"

    def test_unknown_keys_are_ignored(self):
        prefs = Preferences.from_settings({"somethingElse": "x", "theme": "dark"})

        assert prefs.theme == "dark"
