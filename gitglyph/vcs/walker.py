"""HistoryWalker — feeds a repository's commits, oldest first, to the labeler."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gitglyph.labeler import IdentityLabeler, Label
from gitglyph.vcs.base import CommitSource
from gitglyph.vcs.models import CommitReadError, IdentityRole

logger = logging.getLogger(__name__)


@dataclass
class WalkResult:
    """Per-commit labels in oldest-first order, plus indices of skipped commits."""

    labels: list[Label] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)


class HistoryWalker:
    """Resolves the selected identity of every commit through one labeler."""

    def __init__(
        self,
        source: CommitSource,
        labeler: IdentityLabeler,
        role: IdentityRole = IdentityRole.AUTHOR,
    ) -> None:
        self.source = source
        self.labeler = labeler
        self.role = role

    def walk(self, on_label: Callable[[Label], None] | None = None) -> WalkResult:
        """Label the whole history.

        Raises LogRetrievalError if the log cannot be fetched; unreadable
        individual commits are logged and recorded in ``skipped``.
        """
        commits = self.source.log()
        commits.reverse()

        result = WalkResult()
        for index, raw in enumerate(commits):
            try:
                record = self.source.read_commit(raw, index)
            except CommitReadError as e:
                logger.warning("%s", e)
                result.skipped.append(index)
                continue

            label = self.labeler.resolve(self.role.select(record))
            result.labels.append(label)
            if on_label is not None:
                on_label(label)

        logger.info(
            "labeled %d commits (%d %ss, %d skipped)",
            len(result.labels),
            len(self.labeler),
            self.role.value,
            len(result.skipped),
        )
        return result
