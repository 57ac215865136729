from .gradient_types import (
    GradientKind,
    GradientType,
    Spread,
    Units,
    Side,
    Shape,
    enum_or_none,
)

__all__ = [
    "GradientKind",
    "GradientType",
    "Spread",
    "Units",
    "Side",
    "Shape",
    "enum_or_none",
]
