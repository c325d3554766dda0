from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, List

from .base import AngleUnit, require_positive
from .config import get_tolerance_config
from .logging_utils import apply_debug_logging
from .tri import Triangle

logger = logging.getLogger(__name__)

RIGHT_ANGLE_DEGREES = 90.0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle.

    Interior angles are reported in degrees, see ``angle_unit``.
    """

    width: float
    height: float

    angle_unit: ClassVar[AngleUnit] = AngleUnit.DEGREES

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", require_positive("width", self.width))
        object.__setattr__(self, "height", require_positive("height", self.height))

    @classmethod
    def square(cls, side: float) -> "Rectangle":
        return cls(side, side)

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2.0 * (self.width + self.height)

    def interior_angles(self) -> List[float]:
        return [RIGHT_ANGLE_DEGREES] * 4

    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)

    def is_square(self) -> bool:
        return get_tolerance_config().close(self.width, self.height)

    def split(self) -> Triangle:
        """Cut the rectangle along a diagonal.

        The result has ``side1 == width``, ``side2 == height`` and the
        diagonal as ``side3``, so ``side3`` is opposite the right angle.
        """

        return Triangle.sas(self.width, self.height, math.pi / 2.0)


apply_debug_logging(globals(), logger=logger)
