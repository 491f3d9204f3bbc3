"""CLI entry point for gitglyph."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape

from gitglyph.config import GitGlyphConfig, load_config
from gitglyph.config.loader import DEFAULT_CONFIG_TEMPLATE
from gitglyph.labeler import IdentityLabeler, LabelSpaceExhaustedError, LegendOrder
from gitglyph.output import LabelReporter
from gitglyph.vcs import (
    GitRepoSource,
    HistoryWalker,
    IdentityRole,
    LogRetrievalError,
    RepositoryOpenError,
)

app = typer.Typer(
    name="gitglyph",
    help="Label every commit in a repository's history with a short, colored author tag.",
    add_completion=False,
)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _configure_logging(cfg: GitGlyphConfig) -> None:
    """Route package log records to stderr so they never mix with the label stream."""
    pkg_logger = logging.getLogger("gitglyph")
    for old in list(pkg_logger.handlers):
        pkg_logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    if cfg.log_format == "json":
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(_LOG_LEVELS[cfg.log_level])


_err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _fail(message: str) -> NoReturn:
    """Report a fatal error on stderr, unwrapped, and exit 1."""
    _err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _init_config(value: bool) -> None:
    if not value:
        return
    dest = Path("gitglyph.yaml")
    if dest.exists():
        rprint(f"[yellow]{dest} already exists, not overwriting.[/yellow]")
        raise typer.Exit(1)
    dest.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {dest}")
    raise typer.Exit(0)


@app.command()
def main(
    path: Annotated[str, typer.Argument(help="Path to a git repository")],
    committer: Annotated[
        bool | None,
        typer.Option(
            "--committer/--author",
            help="Label committer identities instead of author identities",
        ),
    ] = None,
    order: Annotated[
        str | None,
        typer.Option("--order", help="Legend order: first-seen or label"),
    ] = None,
    color: Annotated[
        bool | None, typer.Option("--color/--no-color", help="Colorize labels")
    ] = None,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to gitglyph.yaml")
    ] = None,
    init_config: Annotated[
        bool,
        typer.Option(
            "--init-config",
            help="Write a default gitglyph.yaml to the current directory and exit",
            callback=_init_config,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Print one label per commit, oldest first, then the label legend."""
    try:
        cfg = load_config(config)
    except ValueError as e:
        _fail(str(e))
    _configure_logging(cfg)

    if committer is None:
        role = IdentityRole(cfg.labels.role)
    else:
        role = IdentityRole.COMMITTER if committer else IdentityRole.AUTHOR

    try:
        legend_order = LegendOrder(order or cfg.labels.legend_order)
    except ValueError:
        _fail(f"--order must be 'first-seen' or 'label', got {order!r}")

    use_color = cfg.output.color if color is None else color
    console = Console(highlight=False, soft_wrap=True, no_color=not use_color)
    reporter = LabelReporter(console)

    try:
        source = GitRepoSource(path)
    except RepositoryOpenError as e:
        _fail(str(e))

    labeler = IdentityLabeler(palette=cfg.labels.palette)
    walker = HistoryWalker(source, labeler, role)

    with source:
        try:
            walker.walk(on_label=reporter.emit_label)
        except LogRetrievalError as e:
            _fail(str(e))
        except LabelSpaceExhaustedError as e:
            console.print()
            _fail(str(e))

    reporter.emit_legend(role, labeler.all_minted(legend_order))


if __name__ == "__main__":
    app()
