import numpy as np
import pytest

from curves3d.config import PARAMETER_MAX, PARAMETER_MIN
from curves3d.model.collection import (
    generate_random_curves,
    select_circles,
    sort_circles_by_radius,
    sum_of_radii,
)
from curves3d.model.curves import Circle, CurveKind, Ellipse, Helix


def mixed_curves():
    return [
        Circle(5.0),
        Helix(2.0, 1.0),
        Circle(2.0),
        Ellipse(3.0, 4.0),
        Circle(9.0),
        Circle(2.0),
    ]


def test_generate_default_count():
    curves = generate_random_curves(rng=np.random.default_rng(0))
    assert len(curves) == 10


def test_generate_parameters_in_range():
    curves = generate_random_curves(300, rng=np.random.default_rng(42))
    assert len(curves) == 300
    for curve in curves:
        if isinstance(curve, Circle):
            values = [curve.radius]
        elif isinstance(curve, Ellipse):
            values = [curve.radius_x, curve.radius_y]
        else:
            values = [curve.radius, curve.step]
        for v in values:
            assert PARAMETER_MIN <= v <= PARAMETER_MAX
    # 300 draws over three kinds: all of them show up
    assert {curve.kind for curve in curves} == set(CurveKind)


def test_generate_is_reproducible_with_seed():
    a = generate_random_curves(20, rng=np.random.default_rng(7))
    b = generate_random_curves(20, rng=np.random.default_rng(7))
    assert [repr(c) for c in a] == [repr(c) for c in b]


def test_generate_zero_and_negative():
    assert generate_random_curves(0) == []
    with pytest.raises(ValueError):
        generate_random_curves(-1)


def test_select_circles_keeps_order_and_identity():
    curves = mixed_curves()
    circles = select_circles(curves)
    assert len(circles) == 4
    assert all(c.kind == CurveKind.CIRCLE for c in circles)
    assert [c.radius for c in circles] == [5.0, 2.0, 9.0, 2.0]
    assert circles[0] is curves[0]
    assert circles[2] is curves[4]


def test_select_circles_none():
    assert select_circles([Ellipse(1.0, 2.0), Helix(1.0, 1.0)]) == []


def test_sort_does_not_touch_main_collection():
    curves = mixed_curves()
    circles = select_circles(curves)
    sort_circles_by_radius(circles)
    radii = [c.radius for c in circles]
    assert all(a <= b for a, b in zip(radii, radii[1:]))
    assert radii == [2.0, 2.0, 5.0, 9.0]
    # stable: the two radius-2 circles keep their relative order
    assert circles[0] is curves[2]
    assert circles[1] is curves[5]
    assert [repr(c) for c in curves] == [repr(c) for c in mixed_curves()]


def test_sum_of_radii():
    circles = select_circles(mixed_curves())
    assert sum_of_radii(circles) == pytest.approx(18.0)
    assert sum_of_radii([]) == 0.0


def test_sum_is_order_independent():
    circles = select_circles(generate_random_curves(50, rng=np.random.default_rng(3)))
    before = sum_of_radii(circles)
    sort_circles_by_radius(circles)
    assert sum_of_radii(circles) == pytest.approx(before)
