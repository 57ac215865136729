"""2D affine transforms for ``gradientTransform``."""
from __future__ import annotations
import math
import re
from typing import ClassVar, Tuple
import numpy as np

from .errors import TransformError

_TRANSFORM_RE = re.compile(r"\s*([A-Za-z]+)\s*\(([^)]*)\)\s*,?")
_NUMBER_SPLIT_RE = re.compile(r"[\s,]+")

# number of accepted arguments per transform function
_ARITY = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewx": (1,),
    "skewy": (1,),
}


class Affine2D:
    """Immutable affine transform ``(a, b, c, d, e, f)`` in SVG matrix order.

    Maps ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``.
    """
    __slots__ = ('_coeffs', '_is_frozen')

    identity_coeffs: ClassVar[Tuple[float, ...]] = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, a=1.0, b=0.0, c=0.0, d=1.0, e=0.0, f=0.0) -> None:
        self._coeffs = tuple(float(v) for v in (a, b, c, d, e, f))
        super().__setattr__('_is_frozen', True)

    @classmethod
    def identity(cls) -> Affine2D:
        return cls(*cls.identity_coeffs)

    @classmethod
    def from_array(cls, matrix: np.ndarray) -> Affine2D:
        """Build from a 3x3 homogeneous matrix."""
        return cls(matrix[0, 0], matrix[1, 0], matrix[0, 1], matrix[1, 1], matrix[0, 2], matrix[1, 2])

    @property
    def coeffs(self) -> Tuple[float, ...]:
        return self._coeffs

    @property
    def is_identity(self) -> bool:
        return np.allclose(self._coeffs, self.identity_coeffs)

    def to_array(self) -> np.ndarray:
        a, b, c, d, e, f = self._coeffs
        return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)

    def __matmul__(self, other: Affine2D) -> Affine2D:
        """``self @ other`` applies ``other`` first, then ``self``."""
        if not isinstance(other, Affine2D):
            return NotImplemented
        return Affine2D.from_array(self.to_array() @ other.to_array())

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        px, py, _ = self.to_array() @ np.array([x, y, 1.0])
        return float(px), float(py)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Affine2D):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(self._coeffs)

    def __reduce__(self):
        return (self.__class__, self._coeffs)

    def __deepcopy__(self, memo) -> Affine2D:
        return self

    def __repr__(self) -> str:
        return f"Affine2D{self._coeffs!r}"


def _single(name: str, values: Tuple[float, ...]) -> Affine2D:
    if name == "matrix":
        return Affine2D(*values)
    if name == "translate":
        tx, ty = values if len(values) == 2 else (values[0], 0.0)
        return Affine2D(e=tx, f=ty)
    if name == "scale":
        sx, sy = values if len(values) == 2 else (values[0], values[0])
        return Affine2D(a=sx, d=sy)
    if name == "rotate":
        angle = math.radians(values[0])
        cos, sin = math.cos(angle), math.sin(angle)
        rotation = Affine2D(cos, sin, -sin, cos)
        if len(values) == 3:
            cx, cy = values[1], values[2]
            return Affine2D(e=cx, f=cy) @ rotation @ Affine2D(e=-cx, f=-cy)
        return rotation
    if name == "skewx":
        return Affine2D(c=math.tan(math.radians(values[0])))
    # skewy
    return Affine2D(b=math.tan(math.radians(values[0])))


def parse_transform(text: str) -> Affine2D:
    """
    Parse an SVG transform list such as ``"translate(10 5) rotate(45)"``.

    Functions compose left to right, so the rightmost one is applied to
    points first.

    Raises:
        TransformError: On unknown functions, wrong argument counts or
            anything that is not a transform list
    """
    result = Affine2D.identity()
    text = text.strip()
    pos = 0
    while pos < len(text):
        match = _TRANSFORM_RE.match(text, pos)
        if match is None:
            raise TransformError(f"invalid transform list: {text!r}")
        name = match.group(1).lower()
        if name not in _ARITY:
            raise TransformError(f"unknown transform function: {match.group(1)!r}")
        raw = [v for v in _NUMBER_SPLIT_RE.split(match.group(2).strip()) if v]
        try:
            values = tuple(float(v) for v in raw)
        except ValueError:
            raise TransformError(f"invalid number in transform: {match.group(0).strip()!r}") from None
        if len(values) not in _ARITY[name]:
            raise TransformError(
                f"{match.group(1)} expects {' or '.join(map(str, _ARITY[name]))} values, got {len(values)}"
            )
        result = result @ _single(name, values)
        pos = match.end()
    return result
