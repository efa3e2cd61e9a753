from __future__ import annotations

from pathlib import Path

import numpy as np
from loguru import logger
from PIL import Image

from .colormap import ColorMap
from .colors import pack_rgb, rgb_to_hex, rgb_to_lab
from .io import image_to_array, read_image_rgba
from .models import RGB, PaletteResult, Swatch
from .quantizer import MedianCutQuantizer
from .sampling import DEFAULT_QUALITY, sample_pixels

ImageSource = str | Path | Image.Image | np.ndarray

DOMINANT_PALETTE_SIZE = 5


class PaletteExtractor:
    def __init__(
        self,
        quality: int = DEFAULT_QUALITY,
        ignore_white: bool = True,
        quantizer: MedianCutQuantizer | None = None,
        request_timeout: float = 10,
    ) -> None:
        if quality < 1:
            raise ValueError("quality must be greater than 0")
        self.quality = quality
        self.ignore_white = ignore_white
        self.quantizer = quantizer or MedianCutQuantizer()
        self.request_timeout = request_timeout

    def load(self, image: ImageSource) -> np.ndarray:
        if isinstance(image, np.ndarray):
            return image
        if isinstance(image, Image.Image):
            return image_to_array(image)
        return read_image_rgba(image, timeout=self.request_timeout)

    def color_map(self, image: ImageSource, color_count: int) -> ColorMap:
        color_map, _ = self._quantize(image, color_count)
        return color_map

    def palette(self, image: ImageSource, color_count: int = 10) -> list[RGB]:
        return list(self.color_map(image, color_count).palette)

    def dominant_color(self, image: ImageSource) -> RGB:
        return self.color_map(image, DOMINANT_PALETTE_SIZE).palette[0]

    def run(self, image: ImageSource, color_count: int = 10) -> PaletteResult:
        color_map, sample_count = self._quantize(image, color_count)

        warnings: list[str] = []
        if len(color_map) < color_count:
            warnings.append("palette_smaller_than_requested")

        swatches = to_swatches(color_map)
        return PaletteResult(
            dominant=swatches[0],
            swatches=swatches,
            requested_count=color_count,
            sample_count=sample_count,
            warnings=warnings,
        )

    def _quantize(self, image: ImageSource, color_count: int) -> tuple[ColorMap, int]:
        pixels = self.load(image)
        samples = sample_pixels(pixels, quality=self.quality, ignore_white=self.ignore_white)
        color_map = self.quantizer.quantize(samples, color_count)
        logger.info(
            "extracted {} colors from {}x{} image ({} samples, quality={})",
            len(color_map),
            pixels.shape[1],
            pixels.shape[0],
            samples.shape[0],
            self.quality,
        )
        return color_map, int(samples.shape[0])


def to_swatches(color_map: ColorMap) -> list[Swatch]:
    total = max(sum(color_map.populations), 1)
    return [
        Swatch(
            hex=rgb_to_hex(rgb),
            rgb=rgb,
            lab=rgb_to_lab(rgb),
            packed=pack_rgb(rgb),
            population=population,
            proportion=population / total,
        )
        for rgb, population in zip(color_map.palette, color_map.populations)
    ]
