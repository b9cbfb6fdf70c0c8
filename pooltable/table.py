"""
Table geometry. Everything derives from a single width.

    height          = W / 2
    ball diameter   = W / 36
    pocket diameter = 1.5 × ball diameter
    pockets         = four corners + two long-edge midpoints
"""

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

import numpy as np

import pooltable as P


class Pocket(NamedTuple):
    x: float
    y: float


class Cushion(NamedTuple):
    """Axis-aligned rectangle given by its centre and size."""
    cx: float
    cy: float
    width: float
    height: float


@dataclass(frozen=True)
class Table:
    width: float = P.TABLE_WIDTH
    cushion_thickness: float = P.CUSHION_THICKNESS

    def __post_init__(self):
        if not math.isfinite(self.width) or self.width <= 0:
            raise ValueError(f"Table width must be positive, got {self.width}")
        if not math.isfinite(self.cushion_thickness) or self.cushion_thickness <= 0:
            raise ValueError(
                f"Cushion thickness must be positive, got {self.cushion_thickness}")

    @property
    def height(self) -> float:
        return self.width / 2

    @property
    def ball_diameter(self) -> float:
        return self.width * P.BALL_DIAMETER_RATIO

    @property
    def ball_radius(self) -> float:
        return self.ball_diameter / 2

    @property
    def pocket_diameter(self) -> float:
        return self.ball_diameter * P.POCKET_DIAMETER_RATIO

    @property
    def pocket_radius(self) -> float:
        return self.pocket_diameter / 2

    @property
    def pockets(self) -> Tuple[Pocket, ...]:
        w, h = self.width, self.height
        return (
            Pocket(0.0, 0.0), Pocket(w / 2, 0.0), Pocket(w, 0.0),
            Pocket(0.0, h), Pocket(w / 2, h), Pocket(w, h),
        )

    @property
    def pocket_array(self) -> np.ndarray:
        """(6, 2) → [x, y]"""
        return np.array(self.pockets, dtype=float)

    @property
    def pot_distance(self) -> float:
        """Centre-to-centre distance below which a ball drops."""
        return self.ball_radius + self.pocket_radius

    @property
    def cue_spawn(self) -> Tuple[float, float]:
        fx, fy = P.CUE_SPAWN
        return self.width * fx, self.height * fy

    @property
    def d_zone_center(self) -> Tuple[float, float]:
        return self.width * P.D_ZONE_RATIO, self.height / 2

    @property
    def d_zone_radius(self) -> float:
        return self.width * P.D_ZONE_RATIO

    @property
    def cushions(self) -> List[Cushion]:
        """Top, bottom, left, right, centred on the table edges."""
        w, h, t = self.width, self.height, self.cushion_thickness
        return [
            Cushion(w / 2, 0.0, w, t),
            Cushion(w / 2, h, w, t),
            Cushion(0.0, h / 2, t, h),
            Cushion(w, h / 2, t, h),
        ]

    @property
    def placement_bounds(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """((x_min, x_max), (y_min, y_max)) for randomly placed balls."""
        d = self.ball_diameter
        return (d, self.width - d), (d, self.height - d)

    def contains(self, x: float, y: float) -> bool:
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height
