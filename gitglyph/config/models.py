from typing import Literal

from pydantic import BaseModel, Field, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

from gitglyph.labeler.registry import DEFAULT_PALETTE, LABEL_SPACE


class LabelSettings(BaseModel):
    role: Literal["author", "committer"] = "author"
    legend_order: Literal["first-seen", "label"] = "first-seen"
    palette: list[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE))

    @field_validator("palette")
    @classmethod
    def _check_palette(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("palette must contain at least one style")
        if len(v) >= LABEL_SPACE:
            raise ValueError(f"palette must be smaller than {LABEL_SPACE} styles")
        for style in v:
            try:
                Style.parse(style)
            except StyleSyntaxError as e:
                raise ValueError(f"invalid style {style!r}: {e}") from e
        return v


class OutputConfig(BaseModel):
    color: bool = True


class GitGlyphConfig(BaseModel):
    labels: LabelSettings = Field(default_factory=LabelSettings)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
    log_format: Literal["text", "json"] = "text"
