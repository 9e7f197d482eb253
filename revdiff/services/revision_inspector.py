import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from git import Repo
from git.exc import (
    GitCommandError,
    GitCommandNotFound,
    InvalidGitRepositoryError,
    NoSuchPathError,
)

from ..errors import ExternalToolError, ParseError

logger = logging.getLogger(__name__)

# Output of `git show -s --format=%ci`, e.g. "2024-03-05 14:02:11 +0100"
COMMIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"


class RevisionInspector:
    """Runs the git operations needed to compare two revisions."""

    def __init__(self, repo_path: str = "."):
        self._repo_path = Path(repo_path)
        self.repo: Optional[Repo] = None
        self._current_revision: Optional[str] = None

    @property
    def repo_path(self) -> Path:
        if self.repo is not None and self.repo.working_tree_dir:
            return Path(self.repo.working_tree_dir)
        return self._repo_path

    @property
    def current_revision(self) -> Optional[str]:
        return self._current_revision

    def open_repository(self) -> Repo:
        """Open the repository at repo_path, once."""
        if self.repo is None:
            try:
                self.repo = Repo(self._repo_path)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise ExternalToolError(
                    "open repository", f"{self._repo_path} is not a git repository"
                ) from e
            logger.debug("Opened repository at %s", self.repo_path)
        return self.repo

    def list_changed_files(self, from_revision: str, to_revision: str) -> List[str]:
        """List paths that differ between from_revision and to_revision."""
        # -z disables quoting of unusual names; entries are NUL terminated
        output = self._git(
            "diff", "--name-only", "-z", from_revision, to_revision, "--"
        )
        return [path for path in output.split("\0") if path]

    def checkout(self, revision: str) -> str:
        """Check out revision, overwriting tracked files in the working tree."""
        self._git("checkout", revision)
        self._current_revision = revision
        logger.info("Checked out %s", revision)
        return revision

    def commit_date(self, revision: str) -> datetime:
        """Return the committer date of revision."""
        date_str = self._git("show", "-s", "--format=%ci", revision).strip()
        try:
            return datetime.strptime(date_str, COMMIT_DATE_FORMAT)
        except ValueError as e:
            raise ParseError(
                f"Unexpected commit date {date_str!r} for {revision}"
            ) from e

    def _git(self, command: str, *args: str) -> str:
        repo = self.open_repository()
        logger.debug("git %s %s", command, " ".join(args))
        try:
            return getattr(repo.git, command)(*args)
        except GitCommandNotFound as e:
            raise ExternalToolError(f"git {command}", "git executable not found") from e
        except GitCommandError as e:
            message = (e.stderr or str(e)).strip()
            raise ExternalToolError(f"git {command}", message) from e
