"""Capability contract shared by every shape, plus validation helpers."""

from __future__ import annotations

import enum
import logging
import math
from typing import List, Optional, Protocol, runtime_checkable

from .errors import InvalidDimension

logger = logging.getLogger(__name__)


class AngleUnit(str, enum.Enum):
    RADIANS = "radians"
    DEGREES = "degrees"


@runtime_checkable
class Polygon(Protocol):
    """Uniform query surface of a shape.

    Each query returns ``None`` when its formula is undefined for the shape
    at hand. An empty angle list means the shape has no vertices, which is
    a valid answer and not the same as ``None``.
    """

    angle_unit: AngleUnit

    def area(self) -> Optional[float]:
        ...

    def perimeter(self) -> Optional[float]:
        ...

    def interior_angles(self) -> Optional[List[float]]:
        ...


def convert_angle(value: float, source: AngleUnit, target: AngleUnit) -> float:
    if source is target:
        return value
    if target is AngleUnit.DEGREES:
        return math.degrees(value)
    return math.radians(value)


def angles_in(shape: Polygon, unit: AngleUnit = AngleUnit.RADIANS) -> Optional[List[float]]:
    """Return the interior angles of ``shape`` expressed in ``unit``."""

    angles = shape.interior_angles()
    if angles is None:
        return None
    source = AngleUnit(shape.angle_unit)
    target = AngleUnit(unit)
    return [convert_angle(angle, source, target) for angle in angles]


def require_positive(name: str, value: float) -> float:
    """Coerce ``value`` to ``float`` and reject anything that is not a positive finite number."""

    if isinstance(value, bool):
        raise InvalidDimension(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidDimension(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(number) or number <= 0.0:
        logger.debug("Rejecting %s=%r", name, value)
        raise InvalidDimension(f"{name} must be a positive finite number, got {value!r}")
    return number


__all__ = [
    "AngleUnit",
    "Polygon",
    "convert_angle",
    "angles_in",
    "require_positive",
]
