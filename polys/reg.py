"""Regular polygons: equal sides and equal interior angles."""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import ClassVar, List

from .base import AngleUnit, require_positive
from .errors import InvalidGeometry
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

MIN_SIDES = 3


def _side_count(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidGeometry(f"side count must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        count = int(value)
    elif float(value).is_integer():
        count = int(value)
    else:
        raise InvalidGeometry(f"side count must be an integer, got {value!r}")
    if count < MIN_SIDES:
        logger.debug("Rejecting side count %r", value)
        raise InvalidGeometry(f"a polygon needs at least {MIN_SIDES} sides, got {count}")
    return count


@dataclass(frozen=True)
class RegularPolygon:
    """Regular polygon with ``sides`` sides of length ``length``.

    Interior angles are reported in degrees, see ``angle_unit``.
    """

    length: float
    sides: int

    angle_unit: ClassVar[AngleUnit] = AngleUnit.DEGREES

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", require_positive("length", self.length))
        object.__setattr__(self, "sides", _side_count(self.sides))

    @classmethod
    def triangle(cls, length: float) -> "RegularPolygon":
        return cls(length, 3)

    @classmethod
    def square(cls, length: float) -> "RegularPolygon":
        return cls(length, 4)

    @classmethod
    def pentagon(cls, length: float) -> "RegularPolygon":
        return cls(length, 5)

    @classmethod
    def hexagon(cls, length: float) -> "RegularPolygon":
        return cls(length, 6)

    @classmethod
    def heptagon(cls, length: float) -> "RegularPolygon":
        return cls(length, 7)

    @classmethod
    def octagon(cls, length: float) -> "RegularPolygon":
        return cls(length, 8)

    @classmethod
    def nonagon(cls, length: float) -> "RegularPolygon":
        return cls(length, 9)

    def perimeter(self) -> float:
        return self.length * self.sides

    def apothem(self) -> float:
        """Distance from the centre to the midpoint of a side."""

        return self.length / (2.0 * math.tan(math.pi / self.sides))

    def circumradius(self) -> float:
        return self.length / (2.0 * math.sin(math.pi / self.sides))

    def area(self) -> float:
        return self.perimeter() * self.apothem() / 2.0

    def interior_angle(self) -> float:
        return 180.0 * (self.sides - 2) / self.sides

    def exterior_angle(self) -> float:
        return 360.0 / self.sides

    def interior_angles(self) -> List[float]:
        return [self.interior_angle()] * self.sides


apply_debug_logging(globals(), logger=logger)
