# No dependencies
from __future__ import annotations
from enum import Enum
from typing import Optional


class GradientKind(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"


class GradientType(str, Enum):
    """CSS gradient function prefixes (the text before ``-gradient``)."""
    LINEAR = "linear"
    REPEATING_LINEAR = "repeating-linear"
    RADIAL = "radial"
    REPEATING_RADIAL = "repeating-radial"

    @property
    def kind(self) -> GradientKind:
        if self in (GradientType.RADIAL, GradientType.REPEATING_RADIAL):
            return GradientKind.RADIAL
        return GradientKind.LINEAR

    @property
    def repeating(self) -> bool:
        return self.value.startswith("repeating-")


class Spread(str, Enum):
    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


class Units(str, Enum):
    OBJECT_BOUNDING_BOX = "objectBoundingBox"
    USER_SPACE_ON_USE = "userSpaceOnUse"


class Side(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class Shape(str, Enum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


def enum_or_none(enum_cls, text: str) -> Optional[Enum]:
    """Look up ``text`` among the values of ``enum_cls``; None when unknown."""
    try:
        return enum_cls(text.strip())
    except ValueError:
        return None
