"""Output subsystem — renders labels and the identity legend."""

from gitglyph.output.reporter import LabelReporter

__all__ = ["LabelReporter"]
