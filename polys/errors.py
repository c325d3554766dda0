"""Errors raised when a shape cannot be constructed."""


class ShapeError(ValueError):
    """Base class for rejected shape arguments."""


class InvalidDimension(ShapeError):
    """Raised when a length, radius, width or height is not a positive finite number."""


class InvalidGeometry(ShapeError):
    """Raised when the given measurements cannot describe the requested shape."""


class InvalidAngle(ShapeError):
    """Raised when an included angle lies outside the open interval (0, pi)."""


__all__ = [
    "ShapeError",
    "InvalidDimension",
    "InvalidGeometry",
    "InvalidAngle",
]
