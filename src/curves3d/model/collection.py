"""
Curve Collections
=================
Operations over heterogeneous lists of curves: random generation, selection of
circles by kind, ordering by radius and aggregation.

The lists hold references, so a selected circle is the same object as in the
list it was selected from.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from curves3d.config import CURVE_COUNT, PARAMETER_MIN, PARAMETER_MAX
from curves3d.model.curves import Curve, Circle, CurveKind
from curves3d.model.registry import create_curve, curve_class, list_kinds

logger = logging.getLogger(__name__)


def generate_random_curves(
    count: int = CURVE_COUNT,
    rng: Optional[np.random.Generator] = None
) -> list[Curve]:
    """
    Create ``count`` random curves.

    Each curve kind is drawn uniformly from the registered kinds and each shape
    parameter uniformly from [PARAMETER_MIN, PARAMETER_MAX].

    Args:
        count: Number of curves to create.
        rng: Source of randomness. A fresh, unseeded generator if omitted.

    Returns:
        The curves in the order they were drawn.
    """
    if count < 0:
        raise ValueError(f"Curve count must be non-negative, got {count}")
    if rng is None:
        rng = np.random.default_rng()

    kinds = list_kinds()
    curves: list[Curve] = []
    for _ in range(count):
        kind = kinds[int(rng.integers(len(kinds)))]
        n_params = curve_class(kind).PARAMETER_COUNT
        # uniform() samples [low, high); high itself is reached with probability 0
        parameters = rng.uniform(PARAMETER_MIN, PARAMETER_MAX, size=n_params)
        curve = create_curve(kind, *(float(p) for p in parameters))
        logger.debug(f"Generated {curve!r}")
        curves.append(curve)

    logger.info(f"Generated {len(curves)} random curves.")
    return curves


def select_circles(curves: Iterable[Curve]) -> list[Circle]:
    """Return the circles of ``curves`` in their original relative order."""
    circles = [curve for curve in curves if curve.kind == CurveKind.CIRCLE]
    logger.info(f"Selected {len(circles)} circles.")
    return circles


def sort_circles_by_radius(circles: list[Circle]) -> None:
    """Sort ``circles`` in place by ascending radius (stable)."""
    circles.sort(key=lambda circle: circle.radius)


def sum_of_radii(circles: Iterable[Circle]) -> float:
    return float(sum(circle.radius for circle in circles))
