"""Canonical gradient descriptor shared by the CSS and SVG parsers."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union
import copy
import numpy as np

from ..colors.rgb import ColorRGBA, BLACK
from ..transform import Affine2D
from ..types.gradient_types import GradientKind, Spread, Units
from ..types.geometry_types import Point, Box2


@dataclass
class Stop:
    """A color checkpoint along a gradient."""
    offset: float = 0.0
    color: ColorRGBA = BLACK
    opacity: float = 1.0


def _default_linear_bounds() -> Box2:
    # left to right
    return Box2(Point(0.0, 0.0), Point(1.0, 0.0))


@dataclass
class Gradient:
    """
    Linear or radial gradient prior to rasterization.

    Linear gradients run from ``start`` to ``end`` (the min / max corners of
    ``bounds``). Radial gradients use ``center``, ``focal`` and ``radius``;
    only the CSS ``at <position>`` form writes their ``bounds.min``.
    """
    kind: GradientKind = GradientKind.LINEAR
    spread: Spread = Spread.PAD
    units: Units = Units.OBJECT_BOUNDING_BOX
    transform: Affine2D = field(default_factory=Affine2D.identity)
    bounds: Box2 = field(default_factory=_default_linear_bounds)
    center: Point = field(default_factory=lambda: Point(0.5, 0.5))
    focal: Point = field(default_factory=lambda: Point(0.5, 0.5))
    radius: Point = field(default_factory=lambda: Point(0.5, 0.5))
    stops: List[Stop] = field(default_factory=list)

    @classmethod
    def linear(cls, **kwargs) -> Gradient:
        return cls(kind=GradientKind.LINEAR, **kwargs)

    @classmethod
    def radial(cls, **kwargs) -> Gradient:
        return cls(kind=GradientKind.RADIAL, **kwargs)

    # ------------------ GEOMETRY ------------------
    @property
    def is_radial(self) -> bool:
        return self.kind == GradientKind.RADIAL

    @property
    def start(self) -> Point:
        return self.bounds.min

    @start.setter
    def start(self, value: Point) -> None:
        self.bounds.min = value

    @property
    def end(self) -> Point:
        return self.bounds.max

    @end.setter
    def end(self, value: Point) -> None:
        self.bounds.max = value

    def set_radius(self, value: Union[float, Tuple[float, float]]) -> None:
        """Set the radius from a scalar or an ``(rx, ry)`` pair."""
        if isinstance(value, (int, float)):
            self.radius = Point(float(value), float(value))
        else:
            rx, ry = value
            self.radius = Point(float(rx), float(ry))

    def as_kind(self, kind: GradientKind) -> Gradient:
        """Reinterpret this gradient as ``kind`` in place; geometry and stops are kept."""
        self.kind = kind
        return self

    def copy(self) -> Gradient:
        return copy.deepcopy(self)

    # ------------------ RENDERER ARRAYS ------------------
    def offsets(self) -> np.ndarray:
        """Stop offsets as a float32 array."""
        return np.array([s.offset for s in self.stops], dtype=np.float32)

    def colors(self) -> np.ndarray:
        """Stop colors as an (n, 4) float32 unit RGBA array, opacity folded into alpha."""
        if not self.stops:
            return np.zeros((0, 4), dtype=np.float32)
        arr = np.stack([s.color.as_unit() for s in self.stops])
        arr[:, 3] *= np.array([s.opacity for s in self.stops], dtype=np.float32)
        return arr


@dataclass
class Paint:
    """A solid color with an optional gradient on top of it."""
    solid: ColorRGBA = BLACK
    gradient: Optional[Gradient] = None

    @property
    def is_gradient(self) -> bool:
        return self.gradient is not None

    def copy(self) -> Paint:
        return copy.deepcopy(self)
