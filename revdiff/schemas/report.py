"""Schema classes for changed-file reports."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class StatStatus(str, Enum):
    """Outcome of reading a file's metadata at one revision."""

    PRESENT = "present"
    ABSENT = "absent"
    UNREADABLE = "unreadable"


class FileStat(BaseModel):
    """Filesystem metadata for a path at a given revision."""

    path: str
    revision: str
    status: StatStatus
    size: Optional[int] = None  # bytes
    modified_time: Optional[datetime] = None
    extension: str = ""

    @property
    def is_present(self) -> bool:
        return self.status == StatStatus.PRESENT


class FileSnapshot(BaseModel):
    """One half (before or after) of a report row."""

    status: StatStatus
    size: Optional[int] = None
    modified: Optional[datetime] = None
    file_type: str = ""


class ChangedFileRecord(BaseModel):
    """A path reported as changed, with its metadata at both revisions."""

    path: str
    before: Optional[FileSnapshot] = None
    after: Optional[FileSnapshot] = None

    @property
    def before_type(self) -> str:
        # An absent earlier file shows the type it has at the later revision
        if self.before is not None and self.before.status == StatStatus.PRESENT:
            return self.before.file_type
        if self.after is not None and self.after.file_type:
            return self.after.file_type
        return self.before.file_type if self.before is not None else ""

    @property
    def after_type(self) -> str:
        if self.after is not None and self.after.status == StatStatus.PRESENT:
            return self.after.file_type
        return ""


class DiffReport(BaseModel):
    """All changed-file records between two revisions."""

    from_revision: str
    to_revision: str
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None
    records: List[ChangedFileRecord] = []
    unreadable_count: int = 0
    final_revision: Optional[str] = None  # None when the tree was not touched
