import math

import pytest

from polys import InvalidAngle, InvalidDimension, InvalidGeometry, Triangle


def test_heron_area_and_perimeter():
    tri = Triangle(24, 30, 18)

    assert tri.area() == 216.0
    assert tri.perimeter() == 72.0


@pytest.mark.parametrize(
    'sides',
    [
        (10, 30, 5),
        (30, 10, 5),
        (5, 10, 30),
        (1, 2, 3),  # collinear
        (3, 1, 2),
        (2, 3, 1),
    ],
)
def test_triangle_inequality_checked_for_every_side(sides):
    with pytest.raises(InvalidGeometry):
        Triangle(*sides)


@pytest.mark.parametrize('sides', [(0, 4, 5), (3, 0, 5), (3, 4, 0), (-3, 4, 5), (3, 4, math.inf)])
def test_non_positive_sides_are_invalid_dimensions(sides):
    with pytest.raises(InvalidDimension):
        Triangle(*sides)


def test_right_triangle_angles():
    angles = Triangle(3, 4, 5).interior_angles()

    assert angles is not None
    assert len(angles) == 3
    assert angles[2] == pytest.approx(math.pi / 2)
    assert angles[0] == pytest.approx(math.asin(3 / 5))
    assert angles[1] == pytest.approx(math.asin(4 / 5))


@pytest.mark.parametrize(
    'sides',
    [(3, 4, 5), (24, 30, 18), (24, 30, 24), (1, 1, 1), (7.5, 2.25, 6.1), (1, 1, 1.9999)],
)
def test_angles_sum_to_pi(sides):
    angles = Triangle(*sides).interior_angles()

    assert angles is not None
    assert sum(angles) == pytest.approx(math.pi)
    assert all(angle > 0 for angle in angles)


def test_isosceles_triangle_has_equal_base_angles():
    tri = Triangle(24, 30, 24)
    angles = tri.interior_angles()

    assert angles[0] == angles[2]
    assert tri.is_isosceles()
    assert not tri.is_equilateral()


def test_equilateral_angles_are_sixty_degrees():
    tri = Triangle(2, 2, 2)

    assert tri.is_equilateral()
    assert tri.interior_angles() == pytest.approx([math.pi / 3] * 3)


def test_angle_opposite_matches_interior_angles():
    tri = Triangle(24, 30, 18)
    angles = tri.interior_angles()

    assert [tri.angle_opposite(i) for i in (1, 2, 3)] == angles
    with pytest.raises(IndexError):
        tri.angle_opposite(0)
    with pytest.raises(IndexError):
        tri.angle_opposite(4)


def test_degenerate_angles_are_missing():
    # valid by the inequality, but the smallest angle underflows to zero
    tri = Triangle(1.0, 1e-9, 1.0)

    assert tri.interior_angles() is None
    assert tri.angle_opposite(1) is None
    assert tri.area() >= 0.0
    assert tri.perimeter() == pytest.approx(2.0)


@pytest.mark.parametrize('sides', [(3, 4, 5), (24, 30, 18), (7.5, 2.25, 6.1), (10, 10, 19)])
def test_sas_reproduces_third_side(sides):
    a, b, c = sides
    angle = Triangle(a, b, c).interior_angles()[2]

    rebuilt = Triangle.sas(a, b, angle)

    assert rebuilt.side1 == a
    assert rebuilt.side2 == b
    assert rebuilt.side3 == pytest.approx(c)


@pytest.mark.parametrize('angle', [math.pi, math.pi + 0.1, 4.0, 2 * math.pi])
def test_sas_rejects_straight_or_reflex_angles(angle):
    with pytest.raises(InvalidAngle):
        Triangle.sas(3, 4, angle)


@pytest.mark.parametrize('angle', [0.0, -0.5, math.nan])
def test_sas_rejects_non_positive_angles(angle):
    with pytest.raises(InvalidAngle):
        Triangle.sas(3, 4, angle)


def test_sas_rejects_invalid_sides():
    with pytest.raises(InvalidDimension):
        Triangle.sas(0, 4, math.pi / 3)


def test_sas_equilateral():
    tri = Triangle.sas(5, 5, math.pi / 3)

    assert tri.side3 == pytest.approx(5.0)
    assert tri.is_equilateral()


def test_is_right():
    assert Triangle(5, 12, 13).is_right()
    assert Triangle(13, 5, 12).is_right()
    assert not Triangle(24, 30, 24).is_right()


def test_triangles_compare_by_value():
    assert Triangle(3, 4, 5) == Triangle(3.0, 4.0, 5.0)
    assert hash(Triangle(3, 4, 5)) == hash(Triangle(3.0, 4.0, 5.0))
    assert Triangle(3, 4, 5) != Triangle(4, 3, 5)


@pytest.mark.parametrize('scale', [1e160, 1e-170, 1e300, 1e-300])
def test_angles_are_scale_invariant(scale):
    tri = Triangle(scale, scale, scale)

    assert tri.interior_angles() == pytest.approx([math.pi / 3] * 3)
    assert Triangle(3 * scale, 4 * scale, 5 * scale).angle_opposite(3) == pytest.approx(math.pi / 2)
    assert Triangle(3 * scale, 4 * scale, 5 * scale).is_right()


@pytest.mark.parametrize('scale', [1e150, 1e-150])
def test_area_survives_extreme_scales(scale):
    equilateral = Triangle(scale, scale, scale)
    right = Triangle(3 * scale, 4 * scale, 5 * scale)

    assert equilateral.area() == pytest.approx(math.sqrt(3) / 4 * scale * scale)
    assert right.area() == pytest.approx(6 * scale * scale)


def test_sas_at_extreme_scale():
    scale = 1e200
    tri = Triangle.sas(3 * scale, 4 * scale, math.pi / 2)

    assert tri.side3 == pytest.approx(5 * scale)


@pytest.mark.parametrize('a, b', [(1.0, 1.0), (2.0, 2.0), (1.0, 2.0)])
def test_sas_collapsing_to_a_segment_is_invalid_geometry(a, b):
    with pytest.raises(InvalidGeometry):
        Triangle.sas(a, b, 1e-20)
