"""Shared test fixtures for gitglyph."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from git import Actor, Repo

from gitglyph.config.models import GitGlyphConfig
from gitglyph.labeler import Identity
from gitglyph.vcs.base import CommitSource
from gitglyph.vcs.models import CommitReadError, CommitRecord

# Fixed epoch so commit order never depends on wall-clock time
BASE_TIMESTAMP = 1_700_000_000

ALICE = ("Alice", "alice@example.com")
BOB = ("Bob", "bob@example.com")
CAROL = ("Carol", "carol@example.com")


def _commit_repo(root: Path, history: list[tuple[tuple[str, str], tuple[str, str]]]) -> Repo:
    repo = Repo.init(root)
    tracked = root / "history.txt"
    for i, (author, committer) in enumerate(history):
        tracked.write_text(f"commit {i}\n")
        repo.index.add(["history.txt"])
        date = f"{BASE_TIMESTAMP + i * 3600} +0000"
        repo.index.commit(
            f"commit {i}",
            author=Actor(*author),
            committer=Actor(*committer),
            author_date=date,
            commit_date=date,
        )
    return repo


@pytest.fixture
def make_repo(tmp_path):
    """Build a throwaway repo; history entries are (author, committer) pairs, oldest first."""

    def _make(history, name: str = "repo") -> Path:
        root = tmp_path / name
        root.mkdir()
        _commit_repo(root, history)
        return root

    return _make


@pytest.fixture
def sample_repo(make_repo):
    """Three authors, Alice committing on everyone's behalf."""
    return make_repo(
        [
            (ALICE, ALICE),
            (BOB, ALICE),
            (ALICE, ALICE),
            (CAROL, ALICE),
            (BOB, ALICE),
        ]
    )


def commit_shas(root: Path) -> list[str]:
    """Hex shas of the repo's commits, oldest first."""
    with Repo(root) as repo:
        return [c.hexsha for c in reversed(list(repo.iter_commits()))]


def drop_object(root: Path, hexsha: str) -> None:
    """Delete a loose object file, leaving a dangling reference to it."""
    (root / ".git" / "objects" / hexsha[:2] / hexsha[2:]).unlink()


@pytest.fixture
def sample_config():
    return GitGlyphConfig()


class FakeSource(CommitSource):
    """In-memory commit source; entries that are exceptions fail on read.

    ``history`` is given oldest first and handed out newest first, the
    way a real git log is.
    """

    def __init__(self, history: list[CommitRecord | Exception]) -> None:
        self._history = list(history)

    def log(self) -> list[CommitRecord | Exception]:
        return list(reversed(self._history))

    def read_commit(self, raw, index: int) -> CommitRecord:
        if isinstance(raw, Exception):
            raise CommitReadError(index, raw)
        return raw


def record(sha: str, author: tuple[str, str], committer: tuple[str, str] | None = None) -> CommitRecord:
    return CommitRecord(
        sha=sha,
        author=Identity(*author),
        committer=Identity(*(committer or author)),
    )


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI attaches so later tests don't write to closed streams."""
    pkg_logger = logging.getLogger("gitglyph")
    level = pkg_logger.level
    yield
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(level)
