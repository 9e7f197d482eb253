"""Services for the application."""

from .diff_report_builder import DiffReportBuilder
from .factory import (
    MODES,
    create_report_builder,
    create_stat_reader,
)
from .file_stat_reader import CommitTreeStatReader, WorkingTreeStatReader
from .report_writer import ReportWriter
from .revision_inspector import RevisionInspector

__all__ = [
    "MODES",
    "CommitTreeStatReader",
    "DiffReportBuilder",
    "ReportWriter",
    "RevisionInspector",
    "WorkingTreeStatReader",
    "create_report_builder",
    "create_stat_reader",
]
