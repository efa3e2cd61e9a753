from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from functools import cached_property

import numpy as np

from .histogram import LEVELS, MULT, Histogram, color_key

RGB = tuple[int, int, int]


class Axis(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2


@dataclass(frozen=True)
class ColorBox:
    """Inclusive region of the reduced color space.

    Statistics are computed from the shared histogram on first access and
    cached on the box; the histogram itself is never written.
    """

    histogram: Histogram = field(repr=False, compare=False)
    lower: RGB
    upper: RGB

    def __post_init__(self) -> None:
        for axis in Axis:
            lo, hi = self.lower[axis], self.upper[axis]
            if not 0 <= lo <= hi < LEVELS:
                raise ValueError(
                    f"invalid {axis.name.lower()} range [{lo}, {hi}] for a color box"
                )

    @classmethod
    def covering(cls, histogram: Histogram) -> ColorBox:
        lower, upper = histogram.populated_bounds()
        return cls(histogram, lower, upper)

    @cached_property
    def _cells(self) -> np.ndarray:
        (r1, g1, b1), (r2, g2, b2) = self.lower, self.upper
        return self.histogram.counts[r1 : r2 + 1, g1 : g2 + 1, b1 : b2 + 1]

    @cached_property
    def population(self) -> int:
        return int(self._cells.sum())

    @property
    def extents(self) -> RGB:
        return (
            self.upper[0] - self.lower[0] + 1,
            self.upper[1] - self.lower[1] + 1,
            self.upper[2] - self.lower[2] + 1,
        )

    @property
    def volume(self) -> int:
        r, g, b = self.extents
        return r * g * b

    @property
    def dominant_axis(self) -> Axis:
        extents = self.extents
        # index() returns the first maximum, so ties go R, then G, then B.
        return Axis(extents.index(max(extents)))

    def marginal(self, axis: Axis | int) -> np.ndarray:
        others = tuple(other for other in range(3) if other != axis)
        return self._cells.sum(axis=others)

    @cached_property
    def average_color(self) -> RGB:
        population = self.population
        if population == 0:
            raise ValueError("average color of an empty box is undefined")

        channels = []
        for axis in Axis:
            coords = np.arange(self.lower[axis], self.upper[axis] + 1, dtype=np.int64)
            weighted = int(np.dot(self.marginal(axis), coords))
            channels.append(min(255, int(round(weighted * MULT / population))))
        return channels[0], channels[1], channels[2]

    def shrink(self) -> ColorBox:
        occupied = np.nonzero(self._cells)
        if occupied[0].size == 0:
            raise ValueError("cannot shrink an empty box")
        lower = tuple(self.lower[a] + int(occupied[a].min()) for a in Axis)
        upper = tuple(self.lower[a] + int(occupied[a].max()) for a in Axis)
        if lower == self.lower and upper == self.upper:
            return self
        return ColorBox(self.histogram, lower, upper)  # type: ignore[arg-type]

    def split_at(self, axis: Axis | int, position: int) -> tuple[ColorBox, ColorBox]:
        if not self.lower[axis] <= position < self.upper[axis]:
            raise ValueError(
                f"split position {position} outside [{self.lower[axis]}, {self.upper[axis]})"
            )
        first_upper = list(self.upper)
        first_upper[axis] = position
        second_lower = list(self.lower)
        second_lower[axis] = position + 1
        return (
            ColorBox(self.histogram, self.lower, tuple(first_upper)),  # type: ignore[arg-type]
            ColorBox(self.histogram, tuple(second_lower), self.upper),  # type: ignore[arg-type]
        )

    def contains(self, color: Sequence[int]) -> bool:
        key = color_key(color)
        return all(self.lower[a] <= key[a] <= self.upper[a] for a in Axis)
