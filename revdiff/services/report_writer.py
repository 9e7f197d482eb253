"""CSV serialization of changed-file reports."""

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..errors import ReportWriteError
from ..schemas import DiffReport, FileSnapshot

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d %b %Y"  # 05 Mar 2024
ABSENT = "-"
REVISION_PREFIX_LENGTH = 5

COLUMN_TITLES = [
    "No",
    "File Name",
    "File Type",
    "Date Modified",
    "File Size (KB)",
    "No",
    "File Name",
    "File Type",
    "Date Modified",
    "File Size (KB)",
    "Remark",
]


def short_revision(revision: str) -> str:
    return revision[:REVISION_PREFIX_LENGTH]


def report_filename(from_revision: str, to_revision: str) -> str:
    """File name for a report, e.g. ``diff_abcde_12345.csv``."""
    return f"diff_{short_revision(from_revision)}_{short_revision(to_revision)}.csv"


def format_size(size: Optional[int]) -> str:
    """Bytes as kilobytes with two decimals, or the absence marker."""
    if size is None:
        return ABSENT
    return f"{size / 1024:.2f}"


def format_date(value: Optional[datetime]) -> str:
    if value is None:
        return ABSENT
    return value.strftime(DATE_FORMAT)


class ReportWriter:
    """Writes a DiffReport as a two-block (from/to) CSV file."""

    def __init__(self, output_dir: str = "."):
        self.output_dir = Path(output_dir)

    def write(self, report: DiffReport, remark: str = "") -> Path:
        """Write report and return the path of the CSV file.

        An existing file with the same name is overwritten. If writing fails
        part way a partial file may remain.
        """
        path = self.output_dir / report_filename(
            report.from_revision, report.to_revision
        )
        try:
            with path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerows(self.rows(report, remark))
        except OSError as e:
            raise ReportWriteError(path, e) from e

        logger.info("Wrote %d records to %s", len(report.records), path)
        return path

    def rows(self, report: DiffReport, remark: str = "") -> List[List[str]]:
        rows = [
            [
                "",
                "from",
                short_revision(report.from_revision),
                "",
                "",
                "",
                "to",
                short_revision(report.to_revision),
            ],
            list(COLUMN_TITLES),
        ]
        for number, record in enumerate(report.records, start=1):
            rows.append(
                [str(number), record.path, record.before_type]
                + _half(record.before)
                + [str(number), record.path, record.after_type]
                + _half(record.after)
                + [remark]
            )
        return rows


def _half(snapshot: Optional[FileSnapshot]) -> List[str]:
    if snapshot is None:
        return [ABSENT, ABSENT]
    return [format_date(snapshot.modified), format_size(snapshot.size)]
