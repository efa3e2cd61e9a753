from __future__ import annotations

import pytest

from palette_cut.colors import (
    blue,
    blue_f,
    green,
    green_f,
    pack_rgb,
    red,
    red_f,
    rgb_to_hex,
    rgb_to_lab,
    unpack_rgb,
)


def test_pack_rgb_sets_opaque_alpha():
    packed = pack_rgb((18, 52, 86))

    assert packed == 0xFF123456
    assert (red(packed), green(packed), blue(packed)) == (18, 52, 86)
    assert unpack_rgb(packed) == (18, 52, 86)


def test_rgb_to_hex_is_uppercase():
    assert rgb_to_hex((10, 171, 255)) == "#0AABFF"


def test_rgb_to_lab_of_white_and_black():
    white = rgb_to_lab((255, 255, 255))
    black = rgb_to_lab((0, 0, 0))

    assert white[0] == pytest.approx(100.0, abs=0.01)
    assert white[1] == pytest.approx(0.0, abs=0.01)
    assert black == pytest.approx((0.0, 0.0, 0.0), abs=0.01)


def test_float_channel_getters_keep_8_bit_scale():
    packed = pack_rgb((255, 128, 0))

    assert (red_f(packed), green_f(packed), blue_f(packed)) == (255.0, 128.0, 0.0)
    assert isinstance(green_f(packed), float)
