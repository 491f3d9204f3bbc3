"""Abstract commit source interface."""

from abc import ABC, abstractmethod
from typing import Any

from gitglyph.vcs.models import CommitRecord


class CommitSource(ABC):
    """Supplies a repository's commits for labeling.

    ``log`` is split from ``read_commit`` so that a single unreadable commit
    can be reported and skipped without abandoning the rest of the history.
    """

    @abstractmethod
    def log(self) -> list[Any]:
        """Return raw commit handles in committer-time order, newest first.

        Raises:
            LogRetrievalError: if the history traversal cannot be started.
        """
        ...

    @abstractmethod
    def read_commit(self, raw: Any, index: int) -> CommitRecord:
        """Convert one raw commit handle into a CommitRecord.

        Args:
            raw: An item returned by ``log``.
            index: Position of the commit in the oldest-first sequence.

        Raises:
            CommitReadError: if the commit cannot be read.
        """
        ...
