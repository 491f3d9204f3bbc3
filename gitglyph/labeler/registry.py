"""IdentityLabeler — dedupes identities by fingerprint and mints stable labels."""

from __future__ import annotations

import hashlib
import logging
import string
import threading
from collections.abc import Sequence

from gitglyph.labeler.models import (
    Identity,
    Label,
    LabelSpaceExhaustedError,
    LegendOrder,
)

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase + string.ascii_uppercase
LABEL_WIDTH = 2
LABEL_SPACE = len(ALPHABET) ** LABEL_WIDTH  # 2704

# rich style strings; reused cyclically, so neighbouring labels differ in color
DEFAULT_PALETTE: tuple[str, ...] = (
    "bright_blue",
    "bright_cyan",
    "bright_green",
    "magenta",
    "red",
    "bright_yellow",
    "white on blue",
    "white on red",
    "black on bright_green",
    "white on green",
    "black on bright_yellow",
)


def fingerprint(identity: Identity) -> str:
    """SHA-256 hex digest of name + email, with no separator between them.

    The digest is taken over the UTF-8 encoding of the decoded strings, not the
    raw signature bytes. GitPython decodes commit headers with
    ``errors="replace"``, so two signatures that differ only in invalid UTF-8
    both read as U+FFFD and share a fingerprint. ``surrogateescape`` only keeps
    the digest infallible for strings built elsewhere with lone surrogates.
    """
    raw = (identity.name + identity.email).encode("utf-8", "surrogateescape")
    return hashlib.sha256(raw).hexdigest()


def label_chars(index: int) -> str:
    """Two-digit base-52 rendering of *index*, most significant symbol first."""
    if index < 0:
        raise ValueError(f"label index must be non-negative, got {index}")
    if index >= LABEL_SPACE:
        raise LabelSpaceExhaustedError(index, LABEL_SPACE)
    base = len(ALPHABET)
    return ALPHABET[index // base] + ALPHABET[index % base]


class IdentityLabeler:
    """Maps a stream of identities to stable labels in order of first appearance.

    One instance holds the whole registry for a run: a fingerprint -> Label
    map for deduplication and the mint-ordered list of (Label, Identity) pairs
    for the legend. ``resolve`` is the only mutator and is serialized by a lock.
    """

    def __init__(self, palette: Sequence[str] = DEFAULT_PALETTE) -> None:
        if not palette:
            raise ValueError("palette must contain at least one style")
        self.palette: tuple[str, ...] = tuple(palette)
        self._by_fingerprint: dict[str, Label] = {}
        self._minted: list[tuple[Label, Identity]] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._minted)

    def resolve(self, identity: Identity) -> Label:
        """Return the label for *identity*, minting a new one on first sight."""
        key = fingerprint(identity)
        with self._lock:
            existing = self._by_fingerprint.get(key)
            if existing is not None:
                return existing

            index = len(self._minted)
            label = Label(
                chars=label_chars(index),
                color=self.palette[index % len(self.palette)],
                index=index,
            )
            self._by_fingerprint[key] = label
            self._minted.append((label, identity))

        logger.debug(
            "minted %s for %s <%s> (fingerprint %s)",
            label.chars,
            identity.name,
            identity.email,
            key[:12],
        )
        return label

    def all_minted(
        self, order: LegendOrder = LegendOrder.FIRST_SEEN
    ) -> list[tuple[Label, Identity]]:
        """Every minted (Label, Identity) pair, in mint order or sorted by label."""
        with self._lock:
            minted = list(self._minted)
        if order is LegendOrder.LABEL:
            minted.sort(key=lambda pair: pair[0].chars)
        return minted
