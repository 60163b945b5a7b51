from __future__ import annotations

import io
import json
from pathlib import Path

import numpy as np
import requests
from PIL import Image

from .conversions import rgb_to_hex
from .models import MixResult


def read_image_rgb(image_path: str | Path) -> np.ndarray:
    path_str = str(image_path)
    if path_str.startswith(("http://", "https://")):
        response = requests.get(path_str, timeout=10)
        response.raise_for_status()
        image_data = io.BytesIO(response.content)
        with Image.open(image_data) as image:
            rgb = image.convert("RGB")
            return np.asarray(rgb, dtype=np.uint8)

    path = Path(image_path)
    with Image.open(path) as image:
        rgb = image.convert("RGB")
        return np.asarray(rgb, dtype=np.uint8)


def sample_hex(image_rgb: np.ndarray, x: int, y: int) -> str:
    """Eyedropper: canonical hex of the pixel at column ``x``, row ``y``."""
    if image_rgb.ndim != 3 or image_rgb.shape[2] != 3:
        raise ValueError("image_rgb must have shape (H, W, 3)")

    height, width = image_rgb.shape[:2]
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(
            f"pixel ({x}, {y}) is outside the {width}x{height} image"
        )
    r, g, b = (int(v) for v in image_rgb[y, x])
    return rgb_to_hex(r, g, b)


def write_result_json(result: MixResult, output_path: str | Path) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(result.to_dict(), indent=2)
    path.write_text(payload + "\n", encoding="utf-8")
