from .conversions import InvalidColorFormat, normalize_hex
from .distance import color_distance
from .mixing import DegenerateMixture, mix_colors
from .models import MixResult, MixtureComponent, PaletteColor, SearchResult
from .palette import PAINT_COLORS
from .search import MixSearchEngine, SearchPass, find_best_color_mix
from .validation import validate_mix

__all__ = [
    "DegenerateMixture",
    "InvalidColorFormat",
    "MixResult",
    "MixSearchEngine",
    "MixtureComponent",
    "PAINT_COLORS",
    "PaletteColor",
    "SearchPass",
    "SearchResult",
    "color_distance",
    "find_best_color_mix",
    "mix_colors",
    "normalize_hex",
    "validate_mix",
]
