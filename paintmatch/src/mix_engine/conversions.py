from __future__ import annotations

import math
import re

import numpy as np

from .models import RGB

_HEX_PATTERN = re.compile(r"#?[0-9A-Fa-f]{6}")
_SHORT_HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")

# sRGB companding
_SRGB_THRESHOLD = 0.04045
_SRGB_EXPONENT = 2.4
_SRGB_OFFSET = 0.055
_SRGB_SCALE = 1.055
_SRGB_LINEAR_SLOPE = 12.92

_RGB_TO_XYZ = np.array(
    [
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ],
    dtype=np.float64,
)

# D65 reference white
D65_WHITE = np.array([95.047, 100.0, 108.883], dtype=np.float64)

_LAB_EPSILON = 0.008856
_LAB_KAPPA = 7.787


class InvalidColorFormat(ValueError):
    pass


def normalize_hex(value: str) -> str:
    """Validate a 3- or 6-digit hex color and return it as canonical ``#rrggbb``."""
    text = (value or "").strip()
    if not _SHORT_HEX_PATTERN.fullmatch(text):
        raise InvalidColorFormat(f"invalid hex color '{value}'")
    digits = text.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits.lower()


def is_valid_hex(value: str) -> bool:
    try:
        normalize_hex(value)
    except InvalidColorFormat:
        return False
    return True


def hex_to_rgb(value: str) -> RGB:
    if not isinstance(value, str) or not _HEX_PATTERN.fullmatch(value):
        raise InvalidColorFormat(f"invalid hex color '{value}'")
    packed = int(value[1:] if value.startswith("#") else value, 16)
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def rgb_to_hex(r: float, g: float, b: float) -> str:
    channels = []
    for channel in (r, g, b):
        if not math.isfinite(channel):
            raise InvalidColorFormat(f"channel value {channel!r} is not finite")
        rounded = _round_half_up(channel)
        if rounded < 0 or rounded > 255:
            raise InvalidColorFormat(f"channel value {channel!r} is outside 0..255")
        channels.append(rounded)
    return "#{:02x}{:02x}{:02x}".format(*channels)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rgb_to_hsl(rgb) -> np.ndarray:
    """RGB (0-255) to HSL with hue in degrees and s/l in percent.

    Accepts a single triple or an array of shape (..., 3).
    """
    arr = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]

    high = np.max(arr, axis=-1)
    low = np.min(arr, axis=-1)
    delta = high - low
    lightness = (high + low) / 2.0

    chromatic = delta != 0
    safe_delta = np.where(chromatic, delta, 1.0)
    denom = np.where(lightness > 0.5, 2.0 - high - low, high + low)
    saturation = np.where(chromatic, delta / np.where(chromatic, denom, 1.0), 0.0)

    # max channel precedence is red, then green, then blue
    hue_r = (g - b) / safe_delta + np.where(g < b, 6.0, 0.0)
    hue_g = (b - r) / safe_delta + 2.0
    hue_b = (r - g) / safe_delta + 4.0
    hue = np.where(high == r, hue_r, np.where(high == g, hue_g, hue_b))
    hue = np.where(chromatic, hue / 6.0, 0.0)

    return np.stack([hue * 360.0, saturation * 100.0, lightness * 100.0], axis=-1)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    if not all(math.isfinite(v) for v in (h, s, l)):
        raise InvalidColorFormat(f"HSL values must be finite, got {(h, s, l)!r}")
    hue = (h % 360.0) / 360.0
    sat = s / 100.0
    light = l / 100.0

    if sat == 0:
        r = g = b = light
    else:
        q = light * (1 + sat) if light < 0.5 else light + sat - light * sat
        p = 2 * light - q
        r = _hue_to_channel(p, q, hue + 1 / 3)
        g = _hue_to_channel(p, q, hue)
        b = _hue_to_channel(p, q, hue - 1 / 3)

    return (
        _round_half_up(r * 255),
        _round_half_up(g * 255),
        _round_half_up(b * 255),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def rgb_to_xyz(rgb) -> np.ndarray:
    arr = np.asarray(rgb, dtype=np.float64) / 255.0
    linear = np.where(
        arr > _SRGB_THRESHOLD,
        ((arr + _SRGB_OFFSET) / _SRGB_SCALE) ** _SRGB_EXPONENT,
        arr / _SRGB_LINEAR_SLOPE,
    )
    return (linear @ _RGB_TO_XYZ.T) * 100.0


def xyz_to_lab(xyz) -> np.ndarray:
    ratio = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(
        ratio > _LAB_EPSILON,
        np.cbrt(ratio),
        _LAB_KAPPA * ratio + 16.0 / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack(
        [116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1
    )


def rgb_to_lab(rgb) -> np.ndarray:
    return xyz_to_lab(rgb_to_xyz(rgb))
