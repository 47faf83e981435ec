from .generator import (
    PaletteResult,
    PaletteShortfallWarning,
    build_palette,
    generate_palette,
)
from .distance import is_too_similar
from .extract import dominant_hue, extract_colors
from .loader import load_palette_from_json
from .masks import GAMUT_MASKS, select_mask
from .schemes import SCHEMES, color_at, scheme_display_name

__all__ = [
    "GAMUT_MASKS",
    "PaletteResult",
    "PaletteShortfallWarning",
    "SCHEMES",
    "build_palette",
    "color_at",
    "dominant_hue",
    "extract_colors",
    "generate_palette",
    "is_too_similar",
    "load_palette_from_json",
    "scheme_display_name",
    "select_mask",
]
