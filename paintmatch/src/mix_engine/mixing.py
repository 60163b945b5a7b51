from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from .conversions import hex_to_rgb, rgb_to_hex
from .models import MixtureComponent

ComponentLike = Union[MixtureComponent, tuple[str, float]]


class DegenerateMixture(ValueError):
    pass


def mix_colors(components: Iterable[ComponentLike]) -> str:
    """Percentage-weighted RGB average of the given paints, as hex.

    Percentages need not sum to 100; the accumulated color is divided by the
    actual total when it differs from 1.0.
    """
    r = g = b = 0.0
    total = 0.0
    for hex_value, percentage in _as_pairs(components):
        cr, cg, cb = hex_to_rgb(hex_value)
        p = percentage / 100
        r += cr * p
        g += cg * p
        b += cb * p
        total += p

    if total == 0:
        raise DegenerateMixture("mixture percentages sum to zero")
    if total != 1:
        r /= total
        g /= total
        b /= total

    return rgb_to_hex(r, g, b)


def mix_lattice(percentages: np.ndarray, paint_rgb: np.ndarray) -> np.ndarray:
    """Composite an (N, P) array of paint percentages into (N, 3) integer RGB.

    Uses the same accumulation order and rounding as ``mix_colors`` so each
    row matches the hex that ``mix_colors`` produces for it.
    """
    weights = np.asarray(percentages, dtype=np.float64) / 100
    paints = np.asarray(paint_rgb, dtype=np.float64)
    if weights.ndim != 2 or weights.shape[1] != paints.shape[0]:
        raise ValueError("percentages must have shape (N, number_of_paints)")

    mixed = np.zeros((weights.shape[0], 3), dtype=np.float64)
    total = np.zeros(weights.shape[0], dtype=np.float64)
    for idx in range(paints.shape[0]):
        p = weights[:, idx]
        mixed += paints[idx][None, :] * p[:, None]
        total += p

    if np.any(total == 0):
        raise DegenerateMixture("mixture percentages sum to zero")
    renormalize = total != 1
    mixed[renormalize] /= total[renormalize][:, None]

    return np.floor(mixed + 0.5).astype(np.int64)


def _as_pairs(components: Iterable[ComponentLike]) -> Iterable[tuple[str, float]]:
    for component in components:
        if isinstance(component, MixtureComponent):
            yield component.hex, component.percentage
        else:
            hex_value, percentage = component
            yield hex_value, percentage
