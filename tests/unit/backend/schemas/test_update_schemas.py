"""
Unit Tests for Update Schemas.

changes() decides which columns an update writes, so omitted and
explicit-null fields must come out differently.
"""

import pytest
from pydantic import ValidationError

from cerebra.backend.schemas.folder import FolderCreate, FolderUpdate
from cerebra.backend.schemas.note import NoteCreate, NoteUpdate
from cerebra.backend.schemas.sticky_note import StickyNoteUpdate


class TestFolderUpdateChanges:
    """Three-state parent_id."""

    def test_omitted_parent_is_not_written(self):
        assert FolderUpdate.model_validate({"name": "x"}).changes() == {"name": "x"}

    def test_null_parent_is_written(self):
        assert FolderUpdate.model_validate({"parent_id": None}).changes() == {"parent_id": None}

    def test_parent_id_is_written(self):
        assert FolderUpdate.model_validate({"parent_id": 3}).changes() == {"parent_id": 3}

    def test_null_name_is_dropped(self):
        assert FolderUpdate.model_validate({"name": None, "parent_id": None}).changes() == {
            "parent_id": None,
        }

    def test_empty_payload_writes_nothing(self):
        assert FolderUpdate().changes() == {}


class TestNoteUpdateChanges:

    def test_only_given_fields(self):
        assert NoteUpdate.model_validate({"content": "new text"}).changes() == {"content": "new text"}

    def test_empty_content_is_a_real_value(self):
        assert NoteUpdate(content="").changes() == {"content": ""}

    def test_null_fields_are_dropped(self):
        assert NoteUpdate(title=None, content=None).changes() == {}


class TestStickyNoteUpdateChanges:

    def test_only_given_fields(self):
        assert StickyNoteUpdate(title="T").changes() == {"title": "T"}


class TestCreateValidation:
    """Payload rules for create schemas."""

    def test_folder_name_required(self):
        with pytest.raises(ValidationError):
            FolderCreate.model_validate({"parent_id": 1})

    def test_folder_parent_must_be_positive(self):
        with pytest.raises(ValidationError):
            FolderCreate(name="x", parent_id=0)

    def test_note_requires_folder(self):
        with pytest.raises(ValidationError):
            NoteCreate.model_validate({"title": "No folder"})

    def test_note_content_optional(self):
        assert NoteCreate(title="T", folder_id=1).content is None
