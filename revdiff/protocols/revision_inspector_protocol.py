"""Revision inspector protocol interface."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable


@runtime_checkable
class RevisionInspectorProtocol(Protocol):
    """Protocol for the version-control operations a report needs."""

    @property
    def repo_path(self) -> Path:
        """Root of the working tree."""
        ...

    @property
    def current_revision(self) -> Optional[str]:
        """Revision most recently checked out by this inspector, if any."""
        ...

    def list_changed_files(self, from_revision: str, to_revision: str) -> List[str]:
        """Paths whose content differs between the two revisions."""
        ...

    def checkout(self, revision: str) -> str:
        """Materialize revision into the working tree and return it."""
        ...

    def commit_date(self, revision: str) -> datetime:
        """Commit timestamp of revision, without checking it out."""
        ...
