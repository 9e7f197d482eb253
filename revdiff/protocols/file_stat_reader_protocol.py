"""File stat reader protocol interface."""

from typing import Protocol, runtime_checkable

from ..schemas import FileStat


@runtime_checkable
class FileStatReaderProtocol(Protocol):
    """Protocol for reading a path's metadata at a revision."""

    # True when the revision must be checked out before stat() reflects it
    requires_checkout: bool

    def stat(self, path: str, revision: str) -> FileStat:
        """Return metadata for path; absence is reported, never raised."""
        ...
