"""
Geometric Primitives.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np

from curves3d.utils import format_number

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector3:
    """
    A point or a vector in 3D space.
    """
    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return f"({format_number(self.x)}, {format_number(self.y)}, {format_number(self.z)})"

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)
