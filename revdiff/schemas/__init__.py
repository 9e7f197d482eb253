"""Schemas for the application."""

from .report import (
    ChangedFileRecord,
    DiffReport,
    FileSnapshot,
    FileStat,
    StatStatus,
)

__all__ = [
    "ChangedFileRecord",
    "DiffReport",
    "FileSnapshot",
    "FileStat",
    "StatStatus",
]
