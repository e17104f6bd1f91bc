from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from curves3d.model.curves import Curve, CurveKind

_REGISTRY: dict[str, type[Curve]] = {}


def register_curve(cls: type[Curve]) -> type[Curve]:
    """Class decorator to register a curve variant by its KIND."""
    kind = getattr(cls, "KIND", None)
    if not kind:
        raise ValueError(f"{cls.__name__} must define KIND")
    if not isinstance(getattr(cls, "PARAMETER_COUNT", None), int):
        raise ValueError(f"{cls.__name__} must define PARAMETER_COUNT")
    _REGISTRY[kind] = cls
    return cls


def create_curve(kind: CurveKind | str, *parameters: float) -> Curve:
    cls = _REGISTRY.get(kind)
    if not cls:
        raise KeyError(f"No curve registered for kind '{kind}'")
    if len(parameters) != cls.PARAMETER_COUNT:
        raise ValueError(
            f"{cls.__name__} takes {cls.PARAMETER_COUNT} parameters, got {len(parameters)}"
        )
    return cls(*parameters)


def curve_class(kind: CurveKind | str) -> type[Curve]:
    cls = _REGISTRY.get(kind)
    if not cls:
        raise KeyError(f"No curve registered for kind '{kind}'")
    return cls


def list_kinds() -> list[CurveKind]:
    return list(_REGISTRY.keys())
