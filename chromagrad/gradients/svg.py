"""
SVG ``<linearGradient>`` / ``<radialGradient>`` reading.

The reader walks ``lxml.etree.iterparse`` start/end events and returns as
soon as the gradient element closes, so it can be embedded in a larger
incremental parse through :func:`parse_xml_element`. Character decoding
follows the document's encoding declaration (libxml2 handles legacy
labels such as ``windows-1252``).
"""
from __future__ import annotations
import io
import os
from typing import Iterator, List, Optional, Tuple, Union, BinaryIO
import warnings

import numpy as np
from lxml import etree

from ..colors.rgb import BLACK
from ..colors.resolver import ColorResolver, resolve_color
from ..errors import GradientXMLError, GradientWarning
from ..transform import parse_transform
from ..types.gradient_types import GradientKind, Spread, Units, enum_or_none
from ..utils.num_utils import parse_number, read_fraction
from .gradient import Gradient, Stop

XMLSource = Union[str, os.PathLike, bytes, BinaryIO]
XMLEvents = Iterator[Tuple[str, etree._Element]]
Attr = Tuple[str, str]

LINEAR_GRADIENT = "linearGradient"
RADIAL_GRADIENT = "radialGradient"
STOP = "stop"


def _warn(message: str) -> None:
    warnings.warn(message, GradientWarning, stacklevel=3)


def local_name(name: str) -> str:
    """Strip the ``{namespace}`` part of an lxml tag or attribute name."""
    return etree.QName(name).localname


def element_attrs(element: etree._Element) -> List[Attr]:
    """Attributes in document order, by local name."""
    return [(local_name(key), value) for key, value in element.attrib.items()]


def style_attrs(style: str) -> List[Attr]:
    """Split ``"stop-color:red; stop-opacity:0.5"`` into attribute pairs."""
    attrs = []
    for decl in style.split(";"):
        decl = decl.strip()
        name, sep, value = decl.partition(":")
        if not sep:
            continue
        attrs.append((name.strip(), value.strip()))
    return attrs


class SVGGradientReader:
    """Accumulates one gradient from a sequence of start / end elements."""

    def __init__(self, gradient: Optional[Gradient] = None, resolver: ColorResolver = resolve_color) -> None:
        self.gradient = gradient
        self.resolver = resolver

    # ------------------ ELEMENTS ------------------
    def start(self, element: etree._Element) -> None:
        name = local_name(element.tag)
        if name == LINEAR_GRADIENT:
            self.start_linear(element_attrs(element))
        elif name == RADIAL_GRADIENT:
            self.start_radial(element_attrs(element))
        elif name == STOP:
            self.add_stop(element_attrs(element))
        else:
            _warn(f"cannot process svg element {name!r} inside a gradient")

    def end(self, element: etree._Element) -> bool:
        """Handle an end element; True once the gradient element has closed."""
        name = local_name(element.tag)
        if name in (LINEAR_GRADIENT, RADIAL_GRADIENT):
            return True
        if name != STOP:
            _warn(f"unexpected end element {name!r}")
        return False

    # ------------------ GRADIENTS ------------------
    def start_linear(self, attrs: List[Attr]) -> None:
        if self.gradient is None:
            self.gradient = Gradient.linear()
        else:
            self.gradient = self.gradient.as_kind(GradientKind.LINEAR)
        grad = self.gradient
        for name, value in attrs:
            if name == "x1":
                grad.start.x = read_fraction(value)
            elif name == "y1":
                grad.start.y = read_fraction(value)
            elif name == "x2":
                grad.end.x = read_fraction(value)
            elif name == "y2":
                grad.end.y = read_fraction(value)
            else:
                self.read_gradient_attr(name, value)

    def start_radial(self, attrs: List[Attr]) -> None:
        if self.gradient is None:
            self.gradient = Gradient.radial()
        else:
            self.gradient = self.gradient.as_kind(GradientKind.RADIAL)
        grad = self.gradient
        set_fx = set_fy = False
        for name, value in attrs:
            if name == "r":
                grad.set_radius(read_fraction(value))
            elif name == "cx":
                grad.center.x = read_fraction(value)
            elif name == "cy":
                grad.center.y = read_fraction(value)
            elif name == "fx":
                set_fx = True
                grad.focal.x = read_fraction(value)
            elif name == "fy":
                set_fy = True
                grad.focal.y = read_fraction(value)
            else:
                self.read_gradient_attr(name, value)
        # the focal point defaults to the center, whatever the attribute order
        if not set_fx:
            grad.focal.x = grad.center.x
        if not set_fy:
            grad.focal.y = grad.center.y

    def read_gradient_attr(self, name: str, value: str) -> None:
        """Attributes shared by both gradient elements; anything else (id, href) is ignored."""
        grad = self.gradient
        if name == "gradientTransform":
            grad.transform = parse_transform(value)
        elif name == "gradientUnits":
            units = enum_or_none(Units, value)
            if units is None:
                _warn(f"unknown gradientUnits {value!r}")
            else:
                grad.units = units
        elif name == "spreadMethod":
            spread = enum_or_none(Spread, value)
            if spread is None:
                _warn(f"unknown spreadMethod {value!r}")
            else:
                grad.spread = spread

    # ------------------ STOPS ------------------
    def add_stop(self, attrs: List[Attr]) -> None:
        stop = Stop(offset=0.0, color=BLACK, opacity=1.0)
        style = next((value for name, value in attrs if name == "style"), "")
        if style:
            attrs = attrs + style_attrs(style)
        for name, value in attrs:
            if name == "offset":
                stop.offset = read_fraction(value)
            elif name == "stop-color":
                stop.color = self.resolver(value, None)
            elif name == "stop-opacity":
                stop.opacity = float(np.clip(parse_number(value), 0.0, 1.0))
        if self.gradient is None:
            _warn(f"stop outside of a gradient: {stop}")
            return
        self.gradient.stops.append(stop)


def _next_event(events: XMLEvents) -> Optional[Tuple[str, etree._Element]]:
    try:
        return next(events)
    except StopIteration:
        return None
    except etree.XMLSyntaxError as e:
        raise GradientXMLError(f"gradient xml parsing error: {e}") from e


def parse_xml_element(
    events: XMLEvents,
    start_element: etree._Element,
    gradient: Optional[Gradient] = None,
    resolver: ColorResolver = resolve_color,
) -> Gradient:
    """
    Read a gradient starting at ``start_element``.

    ``events`` is the ``iterparse`` iterator (``events=("start", "end")``)
    that produced ``start_element``; it is consumed up to and including the
    gradient's end element.

    Args:
        events: Ongoing start/end event iterator
        start_element: Element of the start event just received
        gradient: Existing gradient to update, e.g. one referenced through href
        resolver: Color resolver for ``stop-color``

    Returns:
        The gradient read

    Raises:
        GradientXMLError: On malformed XML or when no gradient was found
        FractionError: On a malformed numeric attribute
        ColorResolveError: On an unresolvable ``stop-color``
        TransformError: On a malformed ``gradientTransform``
    """
    reader = SVGGradientReader(gradient, resolver)
    reader.start(start_element)
    while True:
        event = _next_event(events)
        if event is None:
            break
        kind, element = event
        if kind == "start":
            reader.start(element)
        elif kind == "end" and reader.end(element):
            break
    if reader.gradient is None:
        raise GradientXMLError("no linearGradient or radialGradient element found")
    return reader.gradient


def iter_xml_events(source: XMLSource) -> XMLEvents:
    """Start/end event iterator over a path, a binary file object or XML bytes."""
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    return etree.iterparse(source, events=("start", "end"))


def read_xml(source: XMLSource, resolver: ColorResolver = resolve_color) -> Gradient:
    """
    Read the first gradient from an XML document.

    Whatever precedes the first start element (declaration, comments,
    whitespace) is skipped.

    Raises:
        GradientXMLError: On malformed XML or an empty document
    """
    events = iter_xml_events(source)
    while True:
        event = _next_event(events)
        if event is None:
            raise GradientXMLError("no start element found")
        kind, element = event
        if kind == "start":
            return parse_xml_element(events, element, resolver=resolver)
