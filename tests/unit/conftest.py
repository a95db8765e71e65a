"""
Unit Test Fixtures.

Small builders on top of the root store fixtures, so tests can set up
a folder tree in one line.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from itertools import count

import pytest
from sqlalchemy.orm import Session

from cerebra.backend.models import Folder, Note
from cerebra.backend.repositories.folder import FolderRepository
from cerebra.backend.repositories.note import NoteRepository

CLOCK_START = datetime(2024, 1, 1, 9, 0, 0)


@pytest.fixture(autouse=True)
def ticking_clock(monkeypatch) -> Callable[[], datetime]:
    """
    Make repository timestamps strictly increasing, one second per write.

    Ordering and modified_at assertions then hold on any platform clock.
    """
    ticks = count()

    def _now() -> datetime:
        return CLOCK_START + timedelta(seconds=next(ticks))

    monkeypatch.setattr("cerebra.backend.repositories.base.utc_now", _now)
    return _now


@pytest.fixture
def make_folder(db_session: Session) -> Callable[..., Folder]:
    """
    Create folders through the repository.

    Usage:
        def test_tree(make_folder):
            work = make_folder("Work")
            projects = make_folder("Projects", parent_id=work.id)
    """
    repo = FolderRepository(db_session)

    def _make(name: str, parent_id: int | None = None) -> Folder:
        return repo.create(name=name, parent_id=parent_id)

    return _make


@pytest.fixture
def make_note(db_session: Session) -> Callable[..., Note]:
    """Create notes through the repository."""
    repo = NoteRepository(db_session)

    def _make(title: str, folder_id: int, content: str | None = None) -> Note:
        return repo.create_note(title=title, folder_id=folder_id, content=content)

    return _make
