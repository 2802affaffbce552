from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from mandelview.core.complex_num import ComplexNum
from mandelview.core.mapping import map_range


@dataclass(frozen=True)
class Viewport:
    """Visible region of the complex plane."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self):
        if not (self.x_min < self.x_max and self.y_min < self.y_max):
            raise ValueError(f"Viewport bounds must be ordered: {self}")

    @property
    def x_range(self) -> Tuple[float, float]:
        return (self.x_min, self.x_max)

    @property
    def y_range(self) -> Tuple[float, float]:
        return (self.y_min, self.y_max)

    def pixel_to_complex(self, px: int, py: int, width: int, height: int) -> ComplexNum[float]:
        re = map_range((0.0, float(width)), self.x_range, float(px))
        im = map_range((0.0, float(height)), self.y_range, float(py))
        return ComplexNum(re, im)


DEFAULT_VIEWPORT = Viewport(-2.0, 0.47, -1.12, 1.12)
