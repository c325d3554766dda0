"""Closed tagged union over the four shapes."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type, Union

from .base import AngleUnit
from .circle import Circle
from .logging_utils import apply_debug_logging
from .rect import Rectangle
from .reg import RegularPolygon
from .tri import Triangle

logger = logging.getLogger(__name__)

Shape = Union[Rectangle, Circle, Triangle, RegularPolygon]


class ShapeKind(str, enum.Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    REGULAR_POLYGON = "regular_polygon"


_PAYLOAD_TYPES: Dict[ShapeKind, Type] = {
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.CIRCLE: Circle,
    ShapeKind.TRIANGLE: Triangle,
    ShapeKind.REGULAR_POLYGON: RegularPolygon,
}


def kind_of(shape: object) -> ShapeKind:
    for kind, payload_type in _PAYLOAD_TYPES.items():
        if type(shape) is payload_type:
            return kind
    raise TypeError(f"not a supported shape: {type(shape).__name__}")


@dataclass(frozen=True)
class ShapeVariant:
    """One shape of any supported kind, tagged with its :class:`ShapeKind`.

    The contract queries delegate to the wrapped shape; the ``as_*``
    accessors hand back the payload only when the tag matches.
    """

    kind: ShapeKind
    shape: Shape

    def __post_init__(self) -> None:
        kind = ShapeKind(self.kind)
        object.__setattr__(self, "kind", kind)
        expected = _PAYLOAD_TYPES[kind]
        if type(self.shape) is not expected:
            raise TypeError(
                f"{kind.value} variant requires a {expected.__name__}, got {type(self.shape).__name__}"
            )

    @classmethod
    def wrap(cls, shape: Union[Shape, "ShapeVariant"]) -> "ShapeVariant":
        if isinstance(shape, ShapeVariant):
            return shape
        return cls(kind_of(shape), shape)

    @property
    def angle_unit(self) -> AngleUnit:
        return self.shape.angle_unit

    def area(self) -> Optional[float]:
        return self.shape.area()

    def perimeter(self) -> Optional[float]:
        return self.shape.perimeter()

    def interior_angles(self) -> Optional[List[float]]:
        return self.shape.interior_angles()

    def _payload(self, kind: ShapeKind) -> Shape:
        if self.kind is not kind:
            raise TypeError(f"variant holds a {self.kind.value}, not a {kind.value}")
        return self.shape

    def as_rectangle(self) -> Rectangle:
        return self._payload(ShapeKind.RECTANGLE)  # type: ignore[return-value]

    def as_circle(self) -> Circle:
        return self._payload(ShapeKind.CIRCLE)  # type: ignore[return-value]

    def as_triangle(self) -> Triangle:
        return self._payload(ShapeKind.TRIANGLE)  # type: ignore[return-value]

    def as_regular_polygon(self) -> RegularPolygon:
        return self._payload(ShapeKind.REGULAR_POLYGON)  # type: ignore[return-value]


@dataclass(frozen=True)
class ShapeSummary:
    kind: ShapeKind
    area: Optional[float]
    perimeter: Optional[float]
    interior_angles: Optional[Tuple[float, ...]]
    angle_unit: AngleUnit


def summarize(shape: Union[Shape, ShapeVariant]) -> ShapeSummary:
    """Evaluate every contract query of ``shape`` once."""

    variant = ShapeVariant.wrap(shape)
    angles = variant.interior_angles()
    return ShapeSummary(
        kind=variant.kind,
        area=variant.area(),
        perimeter=variant.perimeter(),
        interior_angles=None if angles is None else tuple(angles),
        angle_unit=variant.angle_unit,
    )


apply_debug_logging(globals(), logger=logger, skip={"ShapeKind"})
