import argparse
import logging
import math
from typing import Callable, Dict, List, Optional, Sequence

from polys import (
    AngleUnit,
    Circle,
    Rectangle,
    RegularPolygon,
    Shape,
    ShapeError,
    Triangle,
    angles_in,
    summarize,
)

logger = logging.getLogger(__name__)

_BUILDERS: Dict[str, Callable[[argparse.Namespace], Shape]] = {
    "rectangle": lambda args: Rectangle(args.width, args.height),
    "square": lambda args: Rectangle.square(args.side),
    "circle": lambda args: Circle(args.radius),
    "triangle": lambda args: Triangle(args.a, args.b, args.c),
    "sas": lambda args: Triangle.sas(args.a, args.b, args.angle),
    "regular": lambda args: RegularPolygon(args.length, args.sides),
}


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _format_number(value: Optional[float]) -> str:
    if value is None:
        return "undefined"
    return f"{value:.6g}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polys", description="Report area, perimeter and interior angles of a shape"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--unit",
        choices=[unit.value for unit in AngleUnit],
        help="Report interior angles in this unit (default: the shape's own unit)",
    )
    sub = parser.add_subparsers(dest="shape", required=True)

    rect = sub.add_parser("rectangle", help="Rectangle from width and height")
    rect.add_argument("width", type=float)
    rect.add_argument("height", type=float)

    square = sub.add_parser("square", help="Square from its side")
    square.add_argument("side", type=float)

    circle = sub.add_parser("circle", help="Circle from its radius")
    circle.add_argument("radius", type=float)

    tri = sub.add_parser("triangle", help="Triangle from three sides")
    for name in ("a", "b", "c"):
        tri.add_argument(name, type=float)

    sas = sub.add_parser("sas", help="Triangle from two sides and the included angle")
    sas.add_argument("a", type=float)
    sas.add_argument("b", type=float)
    sas.add_argument("angle", type=float, help="Included angle in degrees")

    reg = sub.add_parser("regular", help="Regular polygon from side length and side count")
    reg.add_argument("length", type=float)
    reg.add_argument("sides", type=int)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.shape == "sas":
        args.angle = math.radians(args.angle)

    try:
        shape = _BUILDERS[args.shape](args)
    except ShapeError as exc:
        logger.error("Cannot build %s: %s", args.shape, exc)
        raise SystemExit(2) from exc

    summary = summarize(shape)
    unit = AngleUnit(args.unit) if args.unit else summary.angle_unit
    angles: Optional[List[float]] = angles_in(shape, unit)

    print(f"kind: {summary.kind.value}")
    print(f"area: {_format_number(summary.area)}")
    print(f"perimeter: {_format_number(summary.perimeter)}")
    if angles is None:
        print(f"interior angles ({unit.value}): undefined")
    else:
        rendered = ", ".join(_format_number(angle) for angle in angles)
        print(f"interior angles ({unit.value}): [{rendered}]")


if __name__ == "__main__":
    main()
