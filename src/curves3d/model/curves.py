"""
Parametric Curves
=================
Closed-form 3D curves evaluated at a real parameter ``t`` (radians).

Classes:
    CurveKind: Tag identifying the variant of a curve.
    Curve: Abstract base class with ``position`` and ``derivative``.
    Circle, Ellipse, Helix: The concrete variants.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
import logging
import math
from typing import ClassVar, TYPE_CHECKING

import numpy as np

from curves3d.config import DEFAULT_RADIUS
from curves3d.model.geometry_primitives import Vector3
from curves3d.model.registry import register_curve
from curves3d.utils import format_number

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


class CurveKind(StrEnum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"


def _positive_or_default(value: float, name: str) -> float:
    """Return ``value`` if it is positive, otherwise DEFAULT_RADIUS."""
    if value > 0:
        return float(value)
    logger.debug(f"Non-positive {name} {value} replaced by {DEFAULT_RADIUS}")
    return DEFAULT_RADIUS


class Curve(ABC):
    """
    Abstract base class for parametric curves.

    The shape parameters are fixed at construction; subclasses expose them
    through read-only properties only.
    """
    KIND: ClassVar[CurveKind]
    PARAMETER_COUNT: ClassVar[int]

    @property
    def kind(self) -> CurveKind:
        return self.KIND

    @abstractmethod
    def _position_components(
        self, t: float | npt.NDArray[np.float64]
    ) -> tuple[float | npt.NDArray[np.float64], ...]:
        """
        Get the (x, y, z) components of the position.

        Args:
            t: Curve parameter, scalar or array.

        Returns:
            Tuple of three scalars or arrays broadcastable against ``t``.
        """
        pass

    @abstractmethod
    def _derivative_components(
        self, t: float | npt.NDArray[np.float64]
    ) -> tuple[float | npt.NDArray[np.float64], ...]:
        """Same as ``_position_components`` for the first derivative."""
        pass

    def position(self, t: float) -> Vector3:
        """Point on the curve at parameter ``t``."""
        x, y, z = self._position_components(t)
        return Vector3(float(x), float(y), float(z))

    def derivative(self, t: float) -> Vector3:
        """First derivative of ``position`` with respect to ``t``."""
        x, y, z = self._derivative_components(t)
        return Vector3(float(x), float(y), float(z))

    def sample(self, t_values: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        """
        Evaluate the position at many parameter values at once.

        Args:
            t_values: Scalar or 1D sequence of parameters.

        Returns:
            An array of shape (n, 3) with one point per parameter value.
        """
        t = np.atleast_1d(np.asarray(t_values, dtype=np.float64))
        components = np.broadcast_arrays(*self._position_components(t))
        return np.column_stack(components).astype(np.float64)


@register_curve
class Circle(Curve):
    """A circle of given radius centred on the origin in the XY plane."""
    KIND = CurveKind.CIRCLE
    PARAMETER_COUNT = 1

    def __init__(self, radius: float) -> None:
        self._radius = _positive_or_default(radius, "radius")

    @property
    def radius(self) -> float:
        return self._radius

    def _position_components(
        self, t: float | npt.NDArray[np.float64]
    ) -> tuple[float | npt.NDArray[np.float64], ...]:
        r = self._radius
        return r * np.cos(t), r * np.sin(t), 0.0

    def _derivative_components(
        self, t: float | npt.NDArray[np.float64]
    ) -> tuple[float | npt.NDArray[np.float64], ...]:
        r = self._radius
        return -r * np.sin(t), r * np.cos(t), 0.0

    def __repr__(self) -> str:
        return f"Circle(radius={format_number(self._radius)})"


@register_curve
class Ellipse(Curve):
    """An axis-aligned ellipse centred on the origin in the XY plane."""
    KIND = CurveKind.ELLIPSE
    PARAMETER_COUNT = 2

    def __init__(self, radius_x: float, radius_y: float) -> None:
        self._radius_x = _positive_or_default(radius_x, "radius_x")
        self._radius_y = _positive_or_default(radius_y, "radius_y")

    @property
    def radius_x(self) -> float:
        return self._radius_x

    @property
    def radius_y(self) -> float:
        return self._radius_y

    def _position_components(
        self, t: float | npt.NDArray[np.float64]
    ) -> tuple[float | npt.NDArray[np.float64], ...]:
        return self._radius_x * np.cos(t), self._radius_y * np.sin(t), 0.0

    def _derivative_components(
        self, t: float | npt.NDArray[np.float64]
    ) -> tuple[float | npt.NDArray[np.float64], ...]:
        return -self._radius_x * np.sin(t), self._radius_y * np.cos(t), 0.0

    def __repr__(self) -> str:
        return (
            f"Ellipse(radius_x={format_number(self._radius_x)}, "
            f"radius_y={format_number(self._radius_y)})"
        )


@register_curve
class Helix(Curve):
    """
    A circular helix around the Z axis.

    ``step`` is the rise along Z per full turn (t += 2*pi). It may be zero or
    negative and is stored as given.
    """
    KIND = CurveKind.HELIX
    PARAMETER_COUNT = 2

    def __init__(self, radius: float, step: float) -> None:
        self._radius = _positive_or_default(radius, "radius")
        self._step = float(step)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def step(self) -> float:
        return self._step

    def _position_components(
        self, t: float | npt.NDArray[np.float64]
    ) -> tuple[float | npt.NDArray[np.float64], ...]:
        r = self._radius
        return r * np.cos(t), r * np.sin(t), self._step * t / TWO_PI

    def _derivative_components(
        self, t: float | npt.NDArray[np.float64]
    ) -> tuple[float | npt.NDArray[np.float64], ...]:
        r = self._radius
        return -r * np.sin(t), r * np.cos(t), self._step / TWO_PI

    def __repr__(self) -> str:
        return f"Helix(radius={format_number(self._radius)}, step={format_number(self._step)})"
