"""Identity labeler — stable two-character labels for commit identities."""

from gitglyph.labeler.models import (
    Identity,
    Label,
    LabelSpaceExhaustedError,
    LegendOrder,
)
from gitglyph.labeler.registry import (
    ALPHABET,
    DEFAULT_PALETTE,
    LABEL_SPACE,
    IdentityLabeler,
    fingerprint,
    label_chars,
)

__all__ = [
    "ALPHABET",
    "DEFAULT_PALETTE",
    "LABEL_SPACE",
    "Identity",
    "IdentityLabeler",
    "Label",
    "LabelSpaceExhaustedError",
    "LegendOrder",
    "fingerprint",
    "label_chars",
]
