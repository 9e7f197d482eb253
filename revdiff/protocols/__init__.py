"""Protocols for the application."""

from .file_stat_reader_protocol import FileStatReaderProtocol
from .revision_inspector_protocol import RevisionInspectorProtocol

__all__ = ["FileStatReaderProtocol", "RevisionInspectorProtocol"]
