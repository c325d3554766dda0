from .errors import ShapeError, InvalidDimension, InvalidGeometry, InvalidAngle
from .base import AngleUnit, Polygon, angles_in, convert_angle
from .config import ToleranceConfig, get_tolerance_config, set_tolerance_config, tolerance
from .rect import Rectangle
from .circle import Circle
from .tri import Triangle
from .reg import RegularPolygon
from .variant import Shape, ShapeKind, ShapeSummary, ShapeVariant, kind_of, summarize

__all__ = [
    'ShapeError',
    'InvalidDimension',
    'InvalidGeometry',
    'InvalidAngle',
    'AngleUnit',
    'Polygon',
    'angles_in',
    'convert_angle',
    'ToleranceConfig',
    'get_tolerance_config',
    'set_tolerance_config',
    'tolerance',
    'Rectangle',
    'Circle',
    'Triangle',
    'RegularPolygon',
    'Shape',
    'ShapeKind',
    'ShapeSummary',
    'ShapeVariant',
    'kind_of',
    'summarize',
]
