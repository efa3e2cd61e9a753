from __future__ import annotations

from dataclasses import dataclass
from typing import Any

RGB = tuple[int, int, int]
LAB = tuple[float, float, float]


@dataclass(frozen=True)
class Swatch:
    hex: str
    rgb: RGB
    lab: LAB
    packed: int
    population: int
    proportion: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "hex": self.hex,
            "rgb": list(self.rgb),
            "lab": [float(v) for v in self.lab],
            "packed": int(self.packed),
            "population": int(self.population),
            "proportion": float(self.proportion),
            "percentage": float(self.proportion * 100.0),
        }


@dataclass(frozen=True)
class PaletteResult:
    dominant: Swatch
    swatches: list[Swatch]
    requested_count: int
    sample_count: int
    warnings: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "dominant": self.dominant.to_dict(),
            "swatches": [swatch.to_dict() for swatch in self.swatches],
            "requested_count": int(self.requested_count),
            "sample_count": int(self.sample_count),
            "warnings": list(self.warnings),
        }
