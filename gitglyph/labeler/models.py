"""Data models for the identity labeler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LabelSpaceExhaustedError(Exception):
    """Raised when more distinct identities are seen than two-char labels exist."""

    def __init__(self, index: int, capacity: int) -> None:
        self.index = index
        self.capacity = capacity
        super().__init__(
            f"label space exhausted: identity #{index + 1} exceeds {capacity} labels"
        )


@dataclass(frozen=True)
class Identity:
    """A commit author or committer, compared by its raw name + email."""

    name: str
    email: str

    def __post_init__(self) -> None:
        for field_name in ("name", "email"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise TypeError(
                    f"{field_name} must be str, got {type(value).__name__}"
                )


@dataclass(frozen=True)
class Label:
    """A minted two-character label and its display style."""

    chars: str
    color: str
    index: int

    def __str__(self) -> str:
        return self.chars


class LegendOrder(str, Enum):
    """Ordering of the minted-label listing."""

    FIRST_SEEN = "first-seen"
    LABEL = "label"
