"""LabelReporter — renders the label stream and legend with rich."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from gitglyph.labeler import Identity, Label
from gitglyph.vcs.models import IdentityRole


def _styled(label: Label) -> Text:
    return Text(label.chars, style=label.color)


class LabelReporter:
    """Writes labels and the legend to a rich Console.

    Names and emails are emitted as plain Text so that brackets in them are
    never read as rich markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)

    def emit_label(self, label: Label) -> None:
        """Print one commit's label followed by a space, without a newline."""
        self.console.print(Text.assemble(_styled(label), " "), end="", soft_wrap=True)

    def emit_legend(
        self, role: IdentityRole, minted: list[tuple[Label, Identity]]
    ) -> None:
        """Print the header and one ``<label>: <name> (<email>)`` line per label."""
        self.console.print()
        self.console.print()
        self.console.print(Text(role.header), soft_wrap=True)
        for label, identity in minted:
            line = Text.assemble(
                _styled(label), f": {identity.name} ({identity.email})"
            )
            self.console.print(line, soft_wrap=True)
