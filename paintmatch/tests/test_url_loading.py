from unittest.mock import MagicMock, patch
import io
import json
import math
import numpy as np
from PIL import Image
import pytest
import requests
from paintmatch.src.mix_engine.io import read_image_rgb, sample_hex, write_result_json
from paintmatch.src.mix_engine.models import MixResult, MixtureComponent

def test_read_image_rgb_url_success():
    # Create a dummy image
    img = Image.new('RGB', (10, 10), color='red')
    img_byte_arr = io.BytesIO()
    img.save(img_byte_arr, format='PNG')
    img_bytes = img_byte_arr.getvalue()

    with patch('requests.get') as mock_get:
        mock_response = MagicMock()
        mock_response.content = img_bytes
        mock_response.raise_for_status.return_value = None
        mock_get.return_value = mock_response

        url = "http://example.com/image.png"
        result = read_image_rgb(url)

        mock_get.assert_called_once_with(url, timeout=10)
        assert isinstance(result, np.ndarray)
        assert result.shape == (10, 10, 3)
        assert sample_hex(result, 0, 0) == "#ff0000"

def test_read_image_rgb_url_failure():
    with patch('requests.get') as mock_get:
        # Mock a 404 error
        mock_response = MagicMock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error")
        mock_get.return_value = mock_response

        url = "http://example.com/nonexistent.png"
        with pytest.raises(requests.exceptions.HTTPError):
            read_image_rgb(url)

def test_read_image_rgb_local_file_converts_to_rgb(tmp_path):
    # RGBA input must come back as plain RGB
    img = Image.new('RGBA', (6, 4), color=(0, 183, 235, 255))
    img_path = tmp_path / "swatch.png"
    img.save(img_path)

    result = read_image_rgb(str(img_path))

    assert result.shape == (4, 6, 3)
    assert sample_hex(result, 5, 3) == "#00b7eb"

def test_sample_hex_uses_column_then_row():
    image = np.zeros((2, 3, 3), dtype=np.uint8)
    image[1, 2] = [255, 242, 0]

    assert sample_hex(image, 2, 1) == "#fff200"
    assert sample_hex(image, 1, 1) == "#000000"

@pytest.mark.parametrize("x, y", [(-1, 0), (3, 0), (0, 2)])
def test_sample_hex_rejects_pixels_outside_image(x, y):
    image = np.zeros((2, 3, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        sample_hex(image, x, y)

def test_write_result_json(tmp_path):
    result = MixResult(
        target_color="#00b7eb",
        color_mix=[MixtureComponent("Cyan", 100, "#00b7eb")],
        mixed_color="#00b7eb",
        distance=0.0,
        passes_run=1,
    )
    empty = MixResult("#123456", [], None, math.inf)

    out_path = tmp_path / "out" / "mix.json"
    write_result_json(result, out_path)
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["color_mix"] == [{"name": "Cyan", "percentage": 100, "hex": "#00b7eb"}]
    assert payload["found"] is True

    write_result_json(empty, out_path)
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["distance"] is None
    assert payload["mixed_color"] is None
    assert payload["found"] is False
