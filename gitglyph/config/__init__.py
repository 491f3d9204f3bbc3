from .loader import load_config
from .models import GitGlyphConfig, LabelSettings, OutputConfig

__all__ = [
    "GitGlyphConfig",
    "LabelSettings",
    "OutputConfig",
    "load_config",
]
