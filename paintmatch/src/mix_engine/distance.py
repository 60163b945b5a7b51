from __future__ import annotations

import numpy as np
from skimage.color import deltaE_cie76

from .conversions import hex_to_rgb, rgb_to_hsl, rgb_to_lab

RGB_WEIGHT = 0.2
HSL_WEIGHT = 0.3
LAB_WEIGHT = 0.5

_HSL_RANGES = np.array([360.0, 100.0, 100.0], dtype=np.float64)


def color_distance(hex_a: str, hex_b: str) -> float:
    """Weighted RGB/HSL/LAB distance between two hex colors."""
    rgb_a = hex_to_rgb(hex_a)
    rgb_b = hex_to_rgb(hex_b)
    return float(distances_to(rgb_a, np.asarray([rgb_b], dtype=np.float64))[0])


def distances_to(target_rgb, candidates_rgb: np.ndarray) -> np.ndarray:
    """Distance from one RGB target to each row of an (N, 3) RGB array."""
    target = np.asarray(target_rgb, dtype=np.float64).reshape(1, 3)
    candidates = np.asarray(candidates_rgb, dtype=np.float64).reshape(-1, 3)

    rgb_dist = _euclidean(candidates - target)

    hsl_delta = (rgb_to_hsl(candidates) - rgb_to_hsl(target)) / _HSL_RANGES
    hsl_dist = _euclidean(hsl_delta)

    lab_dist = deltaE_cie76(rgb_to_lab(target), rgb_to_lab(candidates))

    return RGB_WEIGHT * rgb_dist + HSL_WEIGHT * hsl_dist + LAB_WEIGHT * lab_dist


def _euclidean(delta: np.ndarray) -> np.ndarray:
    return np.sqrt(
        np.square(delta[:, 0]) + np.square(delta[:, 1]) + np.square(delta[:, 2])
    )
