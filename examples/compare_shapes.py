"""Example: compare a square with the four-sided regular polygon of the same side."""

from polys import AngleUnit, Rectangle, RegularPolygon, ShapeVariant, angles_in, summarize


def main() -> None:
    shapes = [
        ShapeVariant.wrap(Rectangle.square(7.0)),
        ShapeVariant.wrap(RegularPolygon.square(7.0)),
        ShapeVariant.wrap(Rectangle(3.0, 4.0).split()),
    ]
    for variant in shapes:
        summary = summarize(variant)
        print(f"{summary.kind.value}: area={summary.area:.6f} perimeter={summary.perimeter:.6f}")
        print("  angles (degrees):", angles_in(variant, AngleUnit.DEGREES))


if __name__ == "__main__":
    main()
