"""Chromagrad: CSS and SVG gradient descriptor parsing."""

from .colors import ColorRGBA, NIL, BLACK, WHITE, resolve_color, ColorResolver
from .gradients import (
    Gradient,
    Stop,
    Paint,
    fix_gradient_stops,
    parse_color_stop,
    parse_css,
    read_xml,
    parse_xml_element,
    iter_xml_events,
)
from .types import GradientKind, GradientType, Spread, Units, Side, Shape
from .transform import Affine2D, parse_transform
from .utils import read_fraction
from .cache import GradientCache, get_cache
from .errors import (
    GradientError,
    FractionError,
    ColorResolveError,
    TransformError,
    GradientXMLError,
    GradientWarning,
)

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorRGBA",
    "NIL",
    "BLACK",
    "WHITE",
    "resolve_color",
    "ColorResolver",
    # gradients
    "Gradient",
    "Stop",
    "Paint",
    "fix_gradient_stops",
    "parse_color_stop",
    "parse_css",
    "read_xml",
    "parse_xml_element",
    "iter_xml_events",
    # enums
    "GradientKind",
    "GradientType",
    "Spread",
    "Units",
    "Side",
    "Shape",
    # geometry and numbers
    "Affine2D",
    "parse_transform",
    "read_fraction",
    # cache
    "GradientCache",
    "get_cache",
    # errors
    "GradientError",
    "FractionError",
    "ColorResolveError",
    "TransformError",
    "GradientXMLError",
    "GradientWarning",
    "__version__",
]
