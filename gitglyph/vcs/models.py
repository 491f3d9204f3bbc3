"""Models and errors for reading commit history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from gitglyph.labeler.models import Identity


class GitGlyphError(Exception):
    """Base class for history-reading failures."""


class RepositoryOpenError(GitGlyphError):
    """The path is missing, not a repository, or cannot be used."""

    def __init__(self, path: str, cause: Exception | str) -> None:
        self.path = path
        super().__init__(f"failed to open repo {path!r}: {cause}")
        if isinstance(cause, Exception):
            self.__cause__ = cause


class LogRetrievalError(GitGlyphError):
    """The history traversal could not be started."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        super().__init__(f"failed to get git log for {path!r}: {cause}")
        self.__cause__ = cause


class CommitReadError(GitGlyphError):
    """A single commit in the log could not be read."""

    def __init__(self, index: int, cause: Exception) -> None:
        self.index = index
        super().__init__(f"error with commit {index}: {cause}")
        self.__cause__ = cause


@dataclass(frozen=True)
class CommitRecord:
    """The parts of a commit the labeler needs."""

    sha: str
    author: Identity
    committer: Identity
    committed_at: datetime | None = None


class IdentityRole(str, Enum):
    """Which identity of a commit gets labeled."""

    AUTHOR = "author"
    COMMITTER = "committer"

    def select(self, record: CommitRecord) -> Identity:
        return record.committer if self is IdentityRole.COMMITTER else record.author

    @property
    def header(self) -> str:
        return "Git committers:" if self is IdentityRole.COMMITTER else "Git authors:"
