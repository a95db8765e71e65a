"""
Unit Tests for Note Repository.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from cerebra.backend.repositories.note import NoteRepository, escape_like


@pytest.fixture
def repo(db_session):
    return NoteRepository(db_session)


@pytest.fixture
def folder(make_folder):
    return make_folder("Inbox")


class TestCreateNote:
    """Tests for note creation."""

    def test_omitted_content_is_stored_as_empty_string(self, repo, folder):
        note = repo.create_note(title="Empty", folder_id=folder.id)

        assert note.content == ""
        assert note.content is not None

    def test_create_with_content(self, repo, folder):
        note = repo.create_note(title="Plan", folder_id=folder.id, content="Step 1")

        assert note.title == "Plan"
        assert note.content == "Step 1"
        assert note.folder_id == folder.id

    def test_create_in_missing_folder_fails(self, repo):
        with pytest.raises(IntegrityError):
            repo.create_note(title="Orphan", folder_id=4242)


class TestListByFolder:
    """Tests for per-folder listing."""

    def test_most_recently_modified_first(self, repo, folder):
        older = repo.create_note(title="Older", folder_id=folder.id)
        newer = repo.create_note(title="Newer", folder_id=folder.id)

        assert [n.id for n in repo.list_by_folder(folder.id)] == [newer.id, older.id]

        repo.update(older.id, content="edited")

        assert [n.id for n in repo.list_by_folder(folder.id)] == [older.id, newer.id]

    def test_only_notes_of_that_folder(self, repo, folder, make_folder):
        other = make_folder("Other")
        mine = repo.create_note(title="Mine", folder_id=folder.id)
        repo.create_note(title="Theirs", folder_id=other.id)

        assert [n.id for n in repo.list_by_folder(folder.id)] == [mine.id]

    def test_missing_folder_lists_nothing(self, repo):
        assert repo.list_by_folder(999) == []


class TestUpdateNote:
    """Tests for partial updates."""

    def test_content_only_update_keeps_title(self, repo, folder):
        note = repo.create_note(title="Keep me", folder_id=folder.id, content="old")
        created_at = note.created_at
        modified_before = note.modified_at

        updated = repo.update(note.id, content="new text")

        assert updated.title == "Keep me"
        assert updated.content == "new text"
        assert updated.created_at == created_at
        assert updated.modified_at > modified_before

    def test_unknown_fields_are_ignored(self, repo, folder):
        note = repo.create_note(title="T", folder_id=folder.id)

        updated = repo.update(note.id, colour="red")

        assert not hasattr(updated, "colour")


class TestSearch:
    """Tests for case-insensitive title-or-content search."""

    def test_matches_title_content_or_both_exactly_once(self, repo, folder):
        title_only = repo.create_note(title="Budget 2026", folder_id=folder.id, content="numbers")
        content_only = repo.create_note(title="Misc", folder_id=folder.id, content="the budget is tight")
        both = repo.create_note(title="Budget", folder_id=folder.id, content="budget review")
        repo.create_note(title="Groceries", folder_id=folder.id, content="milk")

        results = repo.search("BUDGET")

        ids = [n.id for n in results]
        assert sorted(ids) == sorted([title_only.id, content_only.id, both.id])
        assert len(ids) == len(set(ids))

    def test_searches_across_folders(self, repo, folder, make_folder):
        other = make_folder("Other")
        a = repo.create_note(title="alpha", folder_id=folder.id)
        b = repo.create_note(title="alphabet", folder_id=other.id)

        assert {n.id for n in repo.search("alpha")} == {a.id, b.id}

    def test_no_match_returns_empty(self, repo, folder):
        repo.create_note(title="Plan", folder_id=folder.id)

        assert repo.search("zebra") == []

    def test_wildcards_match_literally(self, repo, folder):
        percent = repo.create_note(title="100% done", folder_id=folder.id)
        repo.create_note(title="100 done", folder_id=folder.id)
        underscore = repo.create_note(title="snake_case", folder_id=folder.id)
        repo.create_note(title="snakeXcase", folder_id=folder.id)

        assert [n.id for n in repo.search("0%")] == [percent.id]
        assert [n.id for n in repo.search("e_c")] == [underscore.id]

    def test_backslash_matches_literally(self, repo, folder):
        path = repo.create_note(title="C:\\temp", folder_id=folder.id)
        repo.create_note(title="C:temp", folder_id=folder.id)

        assert [n.id for n in repo.search(":\\t")] == [path.id]


class TestEscapeLike:
    """Tests for LIKE pattern escaping."""

    @pytest.mark.parametrize(
        "raw, escaped",
        [
            ("plain", "plain"),
            ("50%", "50\\%"),
            ("a_b", "a\\_b"),
            ("back\\slash", "back\\\\slash"),
        ],
    )
    def test_escape_like(self, raw, escaped):
        assert escape_like(raw) == escaped
