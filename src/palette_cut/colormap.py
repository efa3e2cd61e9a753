from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cached_property

import numpy as np

from .box import RGB, ColorBox
from .colors import pack_rgb


def _palette_order(box: ColorBox) -> tuple[int, RGB, RGB]:
    return -box.population, box.lower, box.upper


@dataclass(frozen=True)
class ColorMap:
    boxes: tuple[ColorBox, ...]

    @classmethod
    def from_boxes(cls, boxes: Iterable[ColorBox]) -> ColorMap:
        ordered = sorted(boxes, key=_palette_order)
        if any(box.population == 0 for box in ordered):
            raise ValueError("a color map cannot hold empty boxes")
        return cls(tuple(ordered))

    def __len__(self) -> int:
        return len(self.boxes)

    def size(self) -> int:
        return len(self.boxes)

    @cached_property
    def palette(self) -> tuple[RGB, ...]:
        return tuple(box.average_color for box in self.boxes)

    @property
    def populations(self) -> tuple[int, ...]:
        return tuple(box.population for box in self.boxes)

    def packed_palette(self) -> list[int]:
        return [pack_rgb(color) for color in self.palette]

    def nearest(self, color: Sequence[int]) -> int:
        if not self.boxes:
            raise ValueError("color map is empty")
        palette = np.asarray(self.palette, dtype=np.int64)
        target = np.asarray(color[:3], dtype=np.int64)
        distances = np.abs(palette - target).sum(axis=1)
        # argmin keeps the first minimum, so the lower index wins ties
        return int(np.argmin(distances))

    def map(self, color: Sequence[int]) -> RGB:
        for box, average in zip(self.boxes, self.palette):
            if box.contains(color):
                return average
        return self.palette[self.nearest(color)]
