"""Triangles built from three sides or from side-angle-side."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple

import numpy as np

from .base import AngleUnit, require_positive
from .config import get_tolerance_config
from .errors import InvalidAngle, InvalidGeometry
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


def _scale_exponent(*lengths: float) -> int:
    # power of two, so scaling by it is exact
    return math.frexp(max(lengths))[1]


def _law_of_cosines_side(a: float, b: float, angle: float) -> float:
    exponent = _scale_exponent(a, b)
    a = math.ldexp(a, -exponent)
    b = math.ldexp(b, -exponent)
    squared = a * a + b * b - 2.0 * a * b * math.cos(angle)
    return math.ldexp(math.sqrt(max(squared, 0.0)), exponent)


@dataclass(frozen=True)
class Triangle:
    """Triangle described by its three side lengths.

    Construction enforces the strict triangle inequality on all three
    sides, so every instance has a well-defined area and perimeter.
    Interior angles are in radians, ordered so that the i-th angle is the
    one opposite ``side{i}``.
    """

    side1: float
    side2: float
    side3: float

    angle_unit: ClassVar[AngleUnit] = AngleUnit.RADIANS

    def __post_init__(self) -> None:
        for name in ("side1", "side2", "side3"):
            object.__setattr__(self, name, require_positive(name, getattr(self, name)))
        shortest, middle, longest = sorted(self.sides)
        if longest >= shortest + middle:
            logger.debug("Rejecting sides %r: triangle inequality violated", self.sides)
            raise InvalidGeometry(
                f"sides {self.side1!r}, {self.side2!r}, {self.side3!r} do not form a triangle: "
                f"{longest!r} is not less than {shortest!r} + {middle!r}"
            )

    @classmethod
    def sas(cls, a: float, b: float, angle: float) -> "Triangle":
        """Build a triangle from two sides and the angle (radians) between them.

        The third side comes from the law of cosines and is stored as
        ``side3``, opposite ``angle``.
        """

        a = require_positive("a", a)
        b = require_positive("b", b)
        angle = float(angle)
        if not math.isfinite(angle) or angle <= 0.0 or angle >= math.pi:
            logger.debug("Rejecting included angle %r", angle)
            raise InvalidAngle(f"included angle must lie strictly between 0 and pi, got {angle!r}")
        c = _law_of_cosines_side(a, b, angle)
        if c <= 0.0:
            logger.debug("Rejecting sas(%r, %r, %r): third side vanishes", a, b, angle)
            raise InvalidGeometry(f"sides {a!r} and {b!r} at angle {angle!r} collapse to a segment")
        return cls(a, b, c)

    @property
    def sides(self) -> Tuple[float, float, float]:
        return (self.side1, self.side2, self.side3)

    def _scaled_sides(self) -> Tuple[Tuple[float, float, float], int]:
        """Sides divided by a power of two so the longest lies in [0.5, 1)."""

        exponent = _scale_exponent(*self.sides)
        a, b, c = (math.ldexp(side, -exponent) for side in self.sides)
        return (a, b, c), exponent

    def area(self) -> float:
        """Heron's formula."""

        (a, b, c), exponent = self._scaled_sides()
        s = (a + b + c) / 2.0
        return math.ldexp(math.sqrt(max(s * (s - a) * (s - b) * (s - c), 0.0)), 2 * exponent)

    def perimeter(self) -> float:
        return self.side1 + self.side2 + self.side3

    def _angles(self) -> Optional[np.ndarray]:
        scaled, _ = self._scaled_sides()
        opposite = np.array(scaled, dtype=float)
        b = np.roll(opposite, -1)
        c = np.roll(opposite, -2)
        cosines = (b * b + c * c - opposite * opposite) / (2.0 * b * c)
        with np.errstate(invalid="ignore"):
            angles = np.arccos(cosines)
        if not np.all(np.isfinite(angles) & (angles > 0.0)):
            logger.debug("Degenerate angles for %r: %s", self, angles)
            return None
        return angles

    def interior_angles(self) -> Optional[List[float]]:
        angles = self._angles()
        if angles is None:
            return None
        return [float(angle) for angle in angles]

    def angle_opposite(self, index: int) -> Optional[float]:
        """Return the angle opposite ``side{index}`` (1, 2 or 3)."""

        if index not in (1, 2, 3):
            raise IndexError(f"triangle side index must be 1, 2 or 3, got {index!r}")
        angles = self._angles()
        if angles is None:
            return None
        return float(angles[index - 1])

    def is_right(self) -> bool:
        scaled, _ = self._scaled_sides()
        shortest, middle, longest = sorted(scaled)
        return get_tolerance_config().close(shortest * shortest + middle * middle, longest * longest)

    def is_isosceles(self) -> bool:
        config = get_tolerance_config()
        a, b, c = self.sides
        return config.close(a, b) or config.close(b, c) or config.close(a, c)

    def is_equilateral(self) -> bool:
        config = get_tolerance_config()
        a, b, c = self.sides
        return config.close(a, b) and config.close(b, c)


apply_debug_logging(globals(), logger=logger)
