from __future__ import annotations

import numpy as np

from .box import ColorBox


def split_box(box: ColorBox) -> tuple[ColorBox, ColorBox] | None:
    """Cut a box at the population median of its longest axis.

    Returns ``None`` when the box holds a single sample or a single cell.
    Both children are shrunk to the cells they actually populate, so neither
    is ever empty and the pair partitions the parent's samples.
    """
    if box.population <= 1 or box.volume <= 1:
        return None

    box = box.shrink()
    if box.volume <= 1:
        return None

    axis = box.dominant_axis
    cumulative = np.cumsum(box.marginal(axis))
    total = int(cumulative[-1])

    # smallest offset whose running count reaches half of the population
    offset = int(np.searchsorted(2 * cumulative, total, side="left"))
    left_count = int(cumulative[offset])
    if left_count == 0:
        offset += 1
    elif left_count == total:
        offset -= 1

    first, second = box.split_at(axis, box.lower[axis] + offset)
    return first.shrink(), second.shrink()
