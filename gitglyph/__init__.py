"""gitglyph - stable colored labels for the authors of a git history."""

from gitglyph.labeler import Identity, IdentityLabeler, Label, LegendOrder
from gitglyph.output import LabelReporter
from gitglyph.vcs import GitRepoSource, HistoryWalker, IdentityRole
from gitglyph.config import GitGlyphConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "GitGlyphConfig",
    "GitRepoSource",
    "HistoryWalker",
    "Identity",
    "IdentityLabeler",
    "IdentityRole",
    "Label",
    "LabelReporter",
    "LegendOrder",
    "load_config",
]
