"""Shared fixtures: in-memory stand-ins for git and the filesystem."""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from revdiff.config.settings import get_settings
from revdiff.schemas import FileStat, StatStatus


class FakeRevisionInspector:
    """RevisionInspectorProtocol implementation backed by dictionaries."""

    def __init__(
        self,
        changed_files: List[str],
        commit_dates: Dict[str, datetime],
        repo_path: str = "/fake/repo",
    ):
        self.changed_files = changed_files
        self.commit_dates = commit_dates
        self._repo_path = Path(repo_path)
        self._current_revision: Optional[str] = None
        self.calls: List[tuple] = []

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    @property
    def current_revision(self) -> Optional[str]:
        return self._current_revision

    def list_changed_files(self, from_revision: str, to_revision: str) -> List[str]:
        self.calls.append(("list_changed_files", from_revision, to_revision))
        return list(self.changed_files)

    def checkout(self, revision: str) -> str:
        self.calls.append(("checkout", revision))
        self._current_revision = revision
        return revision

    def commit_date(self, revision: str) -> datetime:
        self.calls.append(("commit_date", revision))
        return self.commit_dates[revision]


class FakeStatReader:
    """
    FileStatReaderProtocol implementation with per-revision file sizes.

    ``files`` maps revision -> {path: size}; a path missing from a revision is
    absent, a size of None means unreadable. When ``requires_checkout`` is set
    the reader only answers for the revision the inspector has checked out.
    """

    def __init__(
        self,
        files: Dict[str, Dict[str, Optional[int]]],
        inspector: Optional[FakeRevisionInspector] = None,
        requires_checkout: bool = True,
    ):
        self.files = files
        self.inspector = inspector
        self.requires_checkout = requires_checkout

    def stat(self, path: str, revision: str) -> FileStat:
        if self.requires_checkout:
            assert self.inspector is not None
            assert self.inspector.current_revision == revision
        extension = os.path.splitext(path)[1]
        tree = self.files.get(revision, {})
        if path not in tree:
            return FileStat(
                path=path, revision=revision, status=StatStatus.ABSENT, extension=extension
            )
        size = tree[path]
        if size is None:
            return FileStat(
                path=path,
                revision=revision,
                status=StatStatus.UNREADABLE,
                extension=extension,
            )
        return FileStat(
            path=path,
            revision=revision,
            status=StatStatus.PRESENT,
            size=size,
            modified_time=datetime(2030, 1, 1),
            extension=extension,
        )


FROM_DATE = datetime(2024, 3, 5, 14, 2, 11, tzinfo=timezone.utc)
TO_DATE = datetime(2024, 4, 17, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def commit_dates() -> Dict[str, datetime]:
    return {"abcdef1": FROM_DATE, "1234567": TO_DATE}


@pytest.fixture
def make_inspector(commit_dates):
    def _make(changed_files: List[str]) -> FakeRevisionInspector:
        return FakeRevisionInspector(changed_files, commit_dates)

    return _make


@pytest.fixture
def make_stat_reader():
    def _make(files, inspector=None, requires_checkout=True) -> FakeStatReader:
        return FakeStatReader(files, inspector, requires_checkout)

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
