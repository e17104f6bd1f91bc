"""
Demonstration Driver
====================
Generates random curves, prints their evaluations, then selects, sorts and
sums the circles.

Report layout (stdout):
    Curves at t = PI/4:
    Point: (x, y, z) | Derivative: (x, y, z)    <- one line per curve

    Sorted circles by radius:
    Radius: r                                   <- one line per circle

    Total sum of radii: s
"""
import logging
import sys
from typing import Optional, Sequence, TextIO

from curves3d import config
from curves3d.logging_config import setup_logging
from curves3d.model.collection import (
    generate_random_curves,
    select_circles,
    sort_circles_by_radius,
    sum_of_radii,
)
from curves3d.model.curves import Curve, Circle
from curves3d.utils import format_number

logger = logging.getLogger(__name__)


def format_evaluation(curve: Curve, t: float) -> str:
    return f"Point: {curve.position(t)} | Derivative: {curve.derivative(t)}"


def run(
    curves: Sequence[Curve],
    t: float = config.EVALUATION_PARAMETER,
    stream: Optional[TextIO] = None,
    label: str = config.EVALUATION_LABEL,
) -> list[Circle]:
    """
    Print the full report for ``curves``.

    Args:
        curves: The main collection, printed in order.
        t: Parameter at which every curve is evaluated.
        stream: Where the report is written (stdout if omitted).
        label: How ``t`` is shown in the header.

    Returns:
        The circles of ``curves`` sorted by ascending radius.
    """
    if stream is None:
        stream = sys.stdout

    # 1. Evaluate every curve
    print(f"Curves at t = {label}:", file=stream)
    for curve in curves:
        print(format_evaluation(curve, t), file=stream)

    # 2. Select and sort the circles
    circles = select_circles(curves)
    sort_circles_by_radius(circles)

    print("\nSorted circles by radius:", file=stream)
    for circle in circles:
        print(f"Radius: {format_number(circle.radius)}", file=stream)

    # 3. Aggregate
    total = sum_of_radii(circles)
    print(f"\nTotal sum of radii: {format_number(total)}", file=stream)

    return circles


def main() -> None:
    setup_logging(level=config.LOG_LEVEL)

    curves = generate_random_curves(config.CURVE_COUNT)
    run(curves)


if __name__ == "__main__":
    main()
