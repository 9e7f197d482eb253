"""Builds changed-file reports between two revisions."""

import logging
from datetime import datetime
from typing import List, Optional

from ..protocols import FileStatReaderProtocol, RevisionInspectorProtocol
from ..schemas import (
    ChangedFileRecord,
    DiffReport,
    FileSnapshot,
    FileStat,
    StatStatus,
)

logger = logging.getLogger(__name__)


class DiffReportBuilder:
    """Collects before/after metadata for every file changed between revisions."""

    def __init__(
        self,
        inspector: RevisionInspectorProtocol,
        stat_reader: FileStatReaderProtocol,
    ):
        self.inspector = inspector
        self.stat_reader = stat_reader

    def build(self, from_revision: str, to_revision: str) -> DiffReport:
        """
        Build the report for from_revision -> to_revision.

        With a reader that requires checkout, ``to_revision`` is checked out
        first and ``from_revision`` last, so the working tree is left on
        ``from_revision`` when this returns. ``DiffReport.final_revision``
        names the revision left checked out.
        """
        paths = self.inspector.list_changed_files(from_revision, to_revision)
        records = [ChangedFileRecord(path=path) for path in paths]
        logger.info(
            "%d changed files between %s and %s",
            len(records),
            from_revision,
            to_revision,
        )

        from_date = self.inspector.commit_date(from_revision)
        to_date = self.inspector.commit_date(to_revision)

        report = DiffReport(
            from_revision=from_revision,
            to_revision=to_revision,
            from_date=from_date,
            to_date=to_date,
            records=records,
        )

        for record, snapshot in zip(records, self._collect(paths, to_revision, to_date)):
            record.after = snapshot
        for record, snapshot in zip(
            records, self._collect(paths, from_revision, from_date)
        ):
            record.before = snapshot

        report.unreadable_count = sum(
            1
            for record in records
            for half in (record.before, record.after)
            if half is not None and half.status == StatStatus.UNREADABLE
        )
        if self.stat_reader.requires_checkout:
            report.final_revision = self.inspector.current_revision
        return report

    def _collect(
        self, paths: List[str], revision: str, commit_date: Optional[datetime]
    ) -> List[FileSnapshot]:
        if self.stat_reader.requires_checkout:
            self.inspector.checkout(revision)
        return [
            _snapshot(self.stat_reader.stat(path, revision), commit_date)
            for path in paths
        ]


def _snapshot(stat: FileStat, commit_date: Optional[datetime]) -> FileSnapshot:
    if not stat.is_present:
        return FileSnapshot(status=stat.status, file_type=stat.extension)
    return FileSnapshot(
        status=stat.status,
        size=stat.size,
        modified=commit_date or stat.modified_time,
        file_type=stat.extension,
    )
