"""Commit sources and the history walker."""

from gitglyph.vcs.base import CommitSource
from gitglyph.vcs.local import GitRepoSource
from gitglyph.vcs.models import (
    CommitReadError,
    CommitRecord,
    GitGlyphError,
    IdentityRole,
    LogRetrievalError,
    RepositoryOpenError,
)
from gitglyph.vcs.walker import HistoryWalker, WalkResult

__all__ = [
    "CommitReadError",
    "CommitRecord",
    "CommitSource",
    "GitGlyphError",
    "GitRepoSource",
    "HistoryWalker",
    "IdentityRole",
    "LogRetrievalError",
    "RepositoryOpenError",
    "WalkResult",
]
