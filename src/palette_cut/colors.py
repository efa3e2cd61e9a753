from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from skimage import color as skcolor

OPAQUE = 0xFF << 24


def pack_rgb(rgb: Sequence[int]) -> int:
    return OPAQUE | (int(rgb[0]) << 16) | (int(rgb[1]) << 8) | int(rgb[2])


def red(packed: int) -> int:
    return (packed >> 16) & 0xFF


def green(packed: int) -> int:
    return (packed >> 8) & 0xFF


def blue(packed: int) -> int:
    return packed & 0xFF


def red_f(packed: int) -> float:
    return float(red(packed))


def green_f(packed: int) -> float:
    return float(green(packed))


def blue_f(packed: int) -> float:
    return float(blue(packed))


def unpack_rgb(packed: int) -> tuple[int, int, int]:
    return red(packed), green(packed), blue(packed)


def rgb_to_hex(rgb: Sequence[int]) -> str:
    return f"#{int(rgb[0]):02X}{int(rgb[1]):02X}{int(rgb[2]):02X}"


def rgb_to_lab(rgb: Sequence[int]) -> tuple[float, float, float]:
    rgb_arr = np.array(rgb[:3], dtype=np.float64).reshape(1, 1, 3) / 255.0
    lab = skcolor.rgb2lab(rgb_arr).reshape(3)
    return float(lab[0]), float(lab[1]), float(lab[2])
