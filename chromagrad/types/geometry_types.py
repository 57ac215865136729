from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class Point:
    """A 2D point in gradient space (fractions for objectBoundingBox units)."""
    x: float = 0.0
    y: float = 0.0

    def set_scalar(self, value: float) -> None:
        self.x = value
        self.y = value

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Box2:
    """Min / max extremes; for linear gradients these are the start and end points."""
    min: Point = field(default_factory=Point)
    max: Point = field(default_factory=Point)
