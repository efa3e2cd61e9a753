from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
from loguru import logger

from .errors import EmptyInputError

SIGBITS = 5
RSHIFT = 8 - SIGBITS
LEVELS = 1 << SIGBITS
MULT = 1 << RSHIFT

Bounds = tuple[tuple[int, int, int], tuple[int, int, int]]


def as_sample_array(samples: Sequence[Sequence[int]] | np.ndarray) -> np.ndarray:
    if isinstance(samples, np.ndarray):
        pixels = samples
    else:
        pixels = np.asarray(list(samples))

    if pixels.size == 0:
        raise EmptyInputError("no samples to cluster")
    if pixels.ndim != 2 or pixels.shape[1] != 3:
        raise ValueError("samples must have shape (N, 3)")
    if not np.issubdtype(pixels.dtype, np.integer):
        raise ValueError("samples must hold integer channel values")
    if int(pixels.min()) < 0 or int(pixels.max()) > 255:
        raise ValueError("channel values must lie in [0, 255]")
    return pixels.astype(np.int64)


def color_key(color: Sequence[int]) -> tuple[int, int, int]:
    """Reduce an 8-bit color to its histogram cell by dropping low bits."""
    return (int(color[0]) >> RSHIFT, int(color[1]) >> RSHIFT, int(color[2]) >> RSHIFT)


@dataclass(frozen=True, eq=False)
class Histogram:
    """Read-only (32, 32, 32) table of sample counts per reduced color."""

    counts: np.ndarray

    def __post_init__(self) -> None:
        if self.counts.shape != (LEVELS, LEVELS, LEVELS):
            raise ValueError(
                f"histogram counts must have shape {(LEVELS, LEVELS, LEVELS)}"
            )
        self.counts.setflags(write=False)

    @classmethod
    def build(cls, samples: Sequence[Sequence[int]] | np.ndarray) -> Histogram:
        keys = as_sample_array(samples) >> RSHIFT
        flat = (keys[:, 0] << (2 * SIGBITS)) | (keys[:, 1] << SIGBITS) | keys[:, 2]
        counts = np.bincount(flat, minlength=LEVELS**3).astype(np.int64)
        histogram = cls(counts.reshape(LEVELS, LEVELS, LEVELS))
        logger.debug(
            "built histogram from {} samples over {} populated cells",
            histogram.total,
            int(np.count_nonzero(histogram.counts)),
        )
        return histogram

    @classmethod
    def merge(cls, parts: Iterable[Histogram]) -> Histogram:
        total = np.zeros((LEVELS, LEVELS, LEVELS), dtype=np.int64)
        merged_any = False
        for part in parts:
            total += part.counts
            merged_any = True
        if not merged_any or not total.any():
            raise EmptyInputError("no samples to cluster")
        return cls(total)

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    def populated_bounds(self) -> Bounds:
        occupied = np.nonzero(self.counts)
        if occupied[0].size == 0:
            raise EmptyInputError("histogram has no populated cells")
        lower = tuple(int(axis.min()) for axis in occupied)
        upper = tuple(int(axis.max()) for axis in occupied)
        return lower, upper  # type: ignore[return-value]
