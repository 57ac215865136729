from .gradient import Gradient, Stop, Paint
from .stops import fix_gradient_stops
from .color_stop import parse_color_stop
from .css import (
    parse_css,
    parse_linear_gradient,
    parse_radial_gradient,
    DEG_TO_SIDES,
)
from .svg import (
    read_xml,
    parse_xml_element,
    iter_xml_events,
    SVGGradientReader,
)

__all__ = [
    "Gradient",
    "Stop",
    "Paint",
    "fix_gradient_stops",
    "parse_color_stop",
    "parse_css",
    "parse_linear_gradient",
    "parse_radial_gradient",
    "DEG_TO_SIDES",
    "read_xml",
    "parse_xml_element",
    "iter_xml_events",
    "SVGGradientReader",
]
