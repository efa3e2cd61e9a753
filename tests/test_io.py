from __future__ import annotations

import io
import json
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import numpy as np
import pytest
import requests
from PIL import Image

from palette_cut.io import image_to_array, read_image_rgba, write_result_json


def _png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def test_url_is_fetched_with_the_given_timeout():
    response = MagicMock(content=_png_bytes(Image.new("RGB", (6, 4), color=(10, 20, 30))))

    with patch("palette_cut.io.requests.get", return_value=response) as mock_get:
        pixels = read_image_rgba("https://example.com/swatch.png", timeout=2.5)

    mock_get.assert_called_once_with("https://example.com/swatch.png", timeout=2.5)
    response.raise_for_status.assert_called_once_with()
    assert pixels.shape == (4, 6, 4)
    assert pixels[0, 0].tolist() == [10, 20, 30, 255]


def test_http_errors_propagate():
    response = MagicMock()
    response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error")

    with patch("palette_cut.io.requests.get", return_value=response):
        with pytest.raises(requests.exceptions.HTTPError):
            read_image_rgba("http://example.com/missing.png")


def test_local_file_round_trip_keeps_alpha(tmp_path):
    image_path = tmp_path / "translucent.png"
    Image.new("RGBA", (3, 5), color=(0, 0, 255, 40)).save(image_path)

    pixels = read_image_rgba(image_path)

    assert pixels.dtype == np.uint8
    assert pixels.shape == (5, 3, 4)
    assert pixels[4, 2].tolist() == [0, 0, 255, 40]


def test_palette_images_are_expanded_to_rgba():
    image = Image.new("P", (2, 2))
    image.putpalette([200, 100, 50] + [0, 0, 0] * 255)

    pixels = image_to_array(image)

    assert pixels.shape == (2, 2, 4)
    assert pixels[1, 1].tolist() == [200, 100, 50, 255]


def test_grey_alpha_images_are_expanded_to_rgba():
    pixels = image_to_array(Image.new("LA", (2, 1), color=(90, 120)))

    assert pixels[0, 0].tolist() == [90, 90, 90, 120]


def test_write_result_json_creates_parents(tmp_path):
    result = SimpleNamespace(to_dict=lambda: {"requested_count": 3, "swatches": []})
    out_path = tmp_path / "a" / "b" / "palette.json"

    written = write_result_json(result, out_path)

    assert written == out_path
    text = out_path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert json.loads(text) == {"requested_count": 3, "swatches": []}
