"""Readers for the size, modification time and type of changed files."""

import logging
import os
from datetime import datetime
from pathlib import Path

from git import Repo
from git.exc import BadName

from ..errors import ExternalToolError
from ..schemas import FileStat, StatStatus

logger = logging.getLogger(__name__)


class WorkingTreeStatReader:
    """
    Stats files in the working tree as it currently is.

    The result only reflects ``revision`` if that revision is the one checked
    out; the caller is responsible for checking it out first.
    """

    requires_checkout = True

    def __init__(self, root: Path):
        self.root = Path(root)

    def stat(self, path: str, revision: str) -> FileStat:
        extension = os.path.splitext(path)[1]
        try:
            st = (self.root / path).stat()
        except FileNotFoundError:
            logger.debug("%s not present at %s", path, revision)
            return FileStat(
                path=path,
                revision=revision,
                status=StatStatus.ABSENT,
                extension=extension,
            )
        except OSError as e:
            logger.warning("Skipping file info at %s for %s: %s", revision, path, e)
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
            size=st.st_size,
            modified_time=datetime.fromtimestamp(st.st_mtime),
            extension=extension,
        )


class CommitTreeStatReader:
    """
    Reads blob sizes straight from the object store.

    Nothing is checked out, so the working tree is left untouched. The
    modification time of a file is the commit date of the revision.
    """

    requires_checkout = False

    def __init__(self, repo: Repo):
        self.repo = repo

    def stat(self, path: str, revision: str) -> FileStat:
        extension = os.path.splitext(path)[1]
        try:
            commit = self.repo.commit(revision)
        except (BadName, ValueError) as e:
            raise ExternalToolError("resolve revision", f"{revision}: {e}") from e

        try:
            blob = commit.tree / path
        except KeyError:
            logger.debug("%s not present at %s", path, revision)
            return FileStat(
                path=path,
                revision=revision,
                status=StatStatus.ABSENT,
                extension=extension,
            )

        if blob.type != "blob":
            # Submodule entries carry no blob data
            logger.warning(
                "Skipping file info at %s for %s: %s is not a blob",
                revision,
                path,
                blob.type,
            )
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
            size=blob.size,
            modified_time=commit.committed_datetime,
            extension=extension,
        )
