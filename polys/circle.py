from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, List

from .base import AngleUnit, require_positive
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Circle:
    """Circle described by its radius."""

    radius: float

    angle_unit: ClassVar[AngleUnit] = AngleUnit.RADIANS

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", require_positive("radius", self.radius))

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        """Circumference of the circle."""

        return 2.0 * math.pi * self.radius

    def interior_angles(self) -> List[float]:
        # no vertices
        return []

    def diameter(self) -> float:
        return 2.0 * self.radius


apply_debug_logging(globals(), logger=logger)
