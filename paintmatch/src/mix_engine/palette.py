from __future__ import annotations

import numpy as np

from .conversions import hex_to_rgb
from .models import PaletteColor

CYAN = PaletteColor(name="Cyan", hex="#00b7eb", role="primary")
MAGENTA = PaletteColor(name="Magenta", hex="#ff00ff", role="primary")
YELLOW = PaletteColor(name="Yellow", hex="#fff200", role="primary")
WHITE = PaletteColor(name="White", hex="#ffffff", role="neutral")
BLACK = PaletteColor(name="Black", hex="#000000", role="neutral")

# Lattice order: c, m, y, w, k
PAINT_COLORS: tuple[PaletteColor, ...] = (CYAN, MAGENTA, YELLOW, WHITE, BLACK)

PRIMARY_NAMES = frozenset(paint.name for paint in PAINT_COLORS if paint.role == "primary")

_BY_NAME = {paint.name: paint for paint in PAINT_COLORS}


def get_paint(name: str) -> PaletteColor:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown paint '{name}'") from None


def palette_rgb() -> np.ndarray:
    """Palette colors as a (5, 3) float array in lattice order."""
    return np.asarray(
        [hex_to_rgb(paint.hex) for paint in PAINT_COLORS], dtype=np.float64
    )
