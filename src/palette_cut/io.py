from __future__ import annotations

import io
import json
from pathlib import Path
from typing import BinaryIO

import numpy as np
import requests
from PIL import Image

from .models import PaletteResult

URL_SCHEMES = ("http://", "https://")


def _open_source(source: str | Path, timeout: float) -> BinaryIO | Path:
    if str(source).startswith(URL_SCHEMES):
        response = requests.get(str(source), timeout=timeout)
        response.raise_for_status()
        return io.BytesIO(response.content)
    return Path(source)


def read_image_rgba(source: str | Path, timeout: float = 10) -> np.ndarray:
    """Decode a local file or http(s) URL into an (H, W, 4) uint8 array."""
    with Image.open(_open_source(source, timeout)) as image:
        return image_to_array(image)


def image_to_array(image: Image.Image) -> np.ndarray:
    # palette, greyscale and LA images all gain an explicit alpha channel
    return np.asarray(image.convert("RGBA"), dtype=np.uint8)


def write_result_json(result: PaletteResult, output_path: str | Path) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(result.to_dict(), handle, indent=2)
        handle.write("\n")
    return path
