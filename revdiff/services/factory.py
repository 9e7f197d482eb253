"""Factory for wiring a DiffReportBuilder for the selected mode."""

import logging

from ..errors import UnknownModeError
from ..protocols import FileStatReaderProtocol
from .diff_report_builder import DiffReportBuilder
from .file_stat_reader import CommitTreeStatReader, WorkingTreeStatReader
from .revision_inspector import RevisionInspector

logger = logging.getLogger(__name__)

MODES = ("checkout", "tree")


def create_stat_reader(mode: str, inspector: RevisionInspector) -> FileStatReaderProtocol:
    """
    Create the stat reader for mode.

    Args:
        mode: "checkout" to stat the working tree after each checkout, or
            "tree" to read blob sizes from the object store
        inspector: Inspector for the repository being compared

    Returns:
        FileStatReaderProtocol implementation
    """
    if mode == "tree":
        logger.debug("Tree mode: reading metadata from the object store")
        return CommitTreeStatReader(inspector.open_repository())
    if mode == "checkout":
        logger.debug("Checkout mode: reading metadata from the working tree")
        inspector.open_repository()
        return WorkingTreeStatReader(inspector.repo_path)
    raise UnknownModeError(
        f"Unknown mode {mode!r}, expected one of {', '.join(MODES)}"
    )


def create_report_builder(repo_path: str, mode: str = "checkout") -> DiffReportBuilder:
    inspector = RevisionInspector(repo_path)
    return DiffReportBuilder(inspector, create_stat_reader(mode, inspector))

