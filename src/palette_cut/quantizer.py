from __future__ import annotations

import heapq
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from loguru import logger

from .box import ColorBox
from .colormap import ColorMap
from .errors import InvalidTargetCountError
from .histogram import Histogram, as_sample_array
from .splitter import split_box

MIN_COLORS = 2
MAX_COLORS = 256
POPULATION_FRACTION = 0.75
MAX_ITERATIONS = 1000

Priority = Callable[[ColorBox], int]


class QuantizerState(Enum):
    INITIALIZING = "initializing"
    SPLITTING_POPULATION = "splitting_population"
    SPLITTING_VOLUME = "splitting_volume"
    DONE = "done"


def by_population(box: ColorBox) -> int:
    return box.population


def by_population_volume(box: ColorBox) -> int:
    return box.population * box.volume


@dataclass
class _Run:
    """Working set of a single quantization call."""

    max_iterations: int
    active: list[ColorBox]
    settled: list[ColorBox] = field(default_factory=list)
    state: QuantizerState = QuantizerState.INITIALIZING

    @property
    def box_count(self) -> int:
        return len(self.active) + len(self.settled)

    def advance(self, state: QuantizerState) -> None:
        logger.debug("quantizer state {} -> {}", self.state.value, state.value)
        self.state = state

    def grow(self, state: QuantizerState, target: int, priority: Priority) -> None:
        self.advance(state)
        # corners are unique among disjoint boxes, so they settle equal priorities
        queue = [(-priority(box), box.lower, box.upper, box) for box in self.active]
        heapq.heapify(queue)

        iterations = 0
        while queue and len(queue) + len(self.settled) < target:
            if iterations >= self.max_iterations:
                logger.warning("{} stopped after {} iterations", state.value, iterations)
                break
            iterations += 1

            box = heapq.heappop(queue)[-1]
            children = split_box(box)
            if children is None:
                self.settled.append(box)
                continue
            for child in children:
                heapq.heappush(queue, (-priority(child), child.lower, child.upper, child))

        self.active = [entry[-1] for entry in queue]
        logger.debug(
            "{} finished with {} boxes after {} splits",
            state.value,
            self.box_count,
            iterations,
        )


@dataclass
class MedianCutQuantizer:
    population_fraction: float = POPULATION_FRACTION
    max_iterations: int = MAX_ITERATIONS

    def __post_init__(self) -> None:
        if not 0.0 < self.population_fraction <= 1.0:
            raise ValueError("population_fraction must lie in (0, 1]")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

    def quantize(
        self, samples: Sequence[Sequence[int]] | np.ndarray, color_count: int
    ) -> ColorMap:
        if not MIN_COLORS <= color_count <= MAX_COLORS:
            raise InvalidTargetCountError(
                f"color_count must be between {MIN_COLORS} and {MAX_COLORS}, got {color_count}"
            )
        pixels = as_sample_array(samples)

        histogram = Histogram.build(pixels)
        run = _Run(
            max_iterations=self.max_iterations,
            active=[ColorBox.covering(histogram)],
        )

        population_target = max(1, math.ceil(self.population_fraction * color_count))
        run.grow(QuantizerState.SPLITTING_POPULATION, population_target, by_population)
        run.grow(QuantizerState.SPLITTING_VOLUME, color_count, by_population_volume)
        run.advance(QuantizerState.DONE)

        color_map = ColorMap.from_boxes(run.active + run.settled)
        logger.debug(
            "quantized {} samples into {} of {} requested colors",
            histogram.total,
            len(color_map),
            color_count,
        )
        return color_map


def quantize(
    samples: Sequence[Sequence[int]] | np.ndarray, color_count: int
) -> ColorMap:
    return MedianCutQuantizer().quantize(samples, color_count)
