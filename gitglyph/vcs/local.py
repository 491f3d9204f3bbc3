"""GitRepoSource — reads commit history from a local repository via GitPython."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from pathlib import Path

from git import Actor, Commit, Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError
from git.refs.symbolic import SymbolicReference

from gitglyph.labeler.models import Identity
from gitglyph.vcs.base import CommitSource
from gitglyph.vcs.models import (
    CommitReadError,
    CommitRecord,
    LogRetrievalError,
    RepositoryOpenError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _MissingCommit:
    """Placeholder for a commit reachable from HEAD whose object could not be read."""

    hexsha: str
    cause: Exception


def _identity(actor: Actor) -> Identity:
    # GitPython leaves email as None when the signature has no <...> part
    return Identity(name=actor.name or "", email=actor.email or "")


class GitRepoSource(CommitSource):
    """Commit source backed by a working-tree repository on disk.

    Use as a context manager (or call ``close``) to stop the ``git cat-file``
    helper processes GitPython starts for object reads.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        try:
            self.repo = Repo(self.path)
        except (NoSuchPathError, InvalidGitRepositoryError, OSError) as e:
            raise RepositoryOpenError(self.path, e) from e
        if self.repo.bare:
            self.repo.close()
            raise RepositoryOpenError(self.path, "bare repositories are not supported")
        logger.debug("opened repository at %s", self.repo.working_dir)

    def __enter__(self) -> GitRepoSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.repo.close()

    def log(self) -> list[Commit | _MissingCommit]:
        """Walk the commit graph from HEAD, newest committer time first.

        Parents are expanded lazily through a heap keyed on committer time.
        A parent whose object cannot be read is kept in the sequence as a
        placeholder (placed right after the child that names it) so that
        ``read_commit`` reports it; history only reachable through it is lost.
        """
        try:
            tip_sha = SymbolicReference.dereference_recursive(self.repo, "HEAD")
        except ValueError:
            logger.info("%s has no commits yet", self.path)
            return []

        tip = Commit(self.repo, bytes.fromhex(tip_sha))
        try:
            tip_date = tip.committed_date
        except Exception as e:
            raise LogRetrievalError(self.path, e) from e

        order = itertools.count()
        heap: list[tuple[int, int, Commit | _MissingCommit]] = [(-tip_date, next(order), tip)]
        seen = {tip.binsha}
        commits: list[Commit | _MissingCommit] = []

        while heap:
            neg_date, _, commit = heapq.heappop(heap)
            commits.append(commit)
            if isinstance(commit, _MissingCommit):
                continue
            for parent in commit.parents:
                if parent.binsha in seen:
                    continue
                seen.add(parent.binsha)
                try:
                    entry = (-parent.committed_date, next(order), parent)
                except Exception as e:
                    logger.debug("cannot read commit %s: %s", parent.hexsha, e)
                    entry = (neg_date, next(order), _MissingCommit(parent.hexsha, e))
                heapq.heappush(heap, entry)

        logger.debug("read %d commits from %s", len(commits), self.path)
        return commits

    def read_commit(self, raw: Commit | _MissingCommit, index: int) -> CommitRecord:
        if isinstance(raw, _MissingCommit):
            raise CommitReadError(index, raw.cause)
        try:
            return CommitRecord(
                sha=raw.hexsha,
                author=_identity(raw.author),
                committer=_identity(raw.committer),
                committed_at=raw.committed_datetime,
            )
        except Exception as e:
            raise CommitReadError(index, e) from e
