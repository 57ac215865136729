"""
CSS gradient descriptor parsing.

Handles ``linear-gradient(...)``, ``radial-gradient(...)`` and their
``repeating-`` forms, plus ``url(...)`` references and plain colors:

>>> paint, ok = parse_css("linear-gradient(45deg, red, blue)")
>>> paint.gradient.start, paint.gradient.end
(Point(x=0.0, y=1.0), Point(x=1.0, y=0.0))
>>> [s.offset for s in paint.gradient.stops]
[0.0, 1.0]

Angles are only accepted in 45 degree steps; anything else keeps the
default left-to-right direction and emits a GradientWarning.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import warnings

from ..cache import get_cache
from ..colors.rgb import ColorRGBA, BLACK
from ..colors.resolver import ColorResolver, resolve_color
from ..errors import FractionError, GradientWarning
from ..types.gradient_types import GradientType, Spread, Side, Shape, enum_or_none
from ..types.geometry_types import Box2, Point
from ..utils.num_utils import is_close_to_int, parse_number
from .color_stop import parse_color_stop
from .gradient import Gradient, Paint, Stop
from .stops import fix_gradient_stops

GRADIENT_MARKER = "-gradient"
ARG_SEPARATOR = ", "

UrlResolver = Callable[[str], Optional[Gradient]]

# can't use trig, the sides need exact 0 / 1 extremes
DEG_TO_SIDES: Dict[int, Tuple[Side, ...]] = {
    0: (Side.TOP,),
    360: (Side.TOP,),
    45: (Side.TOP, Side.RIGHT),
    -315: (Side.TOP, Side.RIGHT),
    90: (Side.RIGHT,),
    -270: (Side.RIGHT,),
    135: (Side.BOTTOM, Side.RIGHT),
    -225: (Side.BOTTOM, Side.RIGHT),
    180: (Side.BOTTOM,),
    -180: (Side.BOTTOM,),
    225: (Side.BOTTOM, Side.LEFT),
    -135: (Side.BOTTOM, Side.LEFT),
    270: (Side.LEFT,),
    -90: (Side.LEFT,),
    315: (Side.TOP, Side.LEFT),
    -45: (Side.TOP, Side.LEFT),
}


def _warn(message: str) -> None:
    warnings.warn(message, GradientWarning, stacklevel=3)


def split_arguments(params: str) -> List[str]:
    """Split a gradient argument list on ``", "``, keeping parenthesised groups whole."""
    parts: List[str] = []
    depth = 0
    begin = 0
    i = 0
    while i < len(params):
        ch = params[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif depth == 0 and params.startswith(ARG_SEPARATOR, i):
            parts.append(params[begin:i])
            i += len(ARG_SEPARATOR)
            begin = i
            continue
        i += 1
    parts.append(params[begin:])
    return parts


def parse_sides(words: str) -> List[Side]:
    """Parse space separated side keywords, warning about unknown ones."""
    sides = []
    for word in words.split():
        side = enum_or_none(Side, word)
        if side is None:
            _warn(f"unknown gradient side keyword {word!r}")
            continue
        sides.append(side)
    return sides


def angle_to_sides(segment: str) -> Optional[List[Side]]:
    """Map an ``<n>deg`` segment to side keywords, or None (with a warning) when it is not a 45 degree step."""
    number = segment[:segment.index("deg")]
    try:
        degrees = parse_number(number)
    except FractionError:
        degrees = None
    if degrees is None or not is_close_to_int(degrees) or round(degrees) not in DEG_TO_SIDES:
        _warn(f"invalid gradient angle {segment!r}: must be at 45 degree increments")
        return None
    return list(DEG_TO_SIDES[round(degrees)])


def apply_linear_sides(gradient: Gradient, sides: List[Side]) -> None:
    # SVG space is top-down, so "top" starts at y=1
    gradient.bounds = Box2()
    for side in sides:
        if side == Side.BOTTOM:
            gradient.bounds.min.y = 0.0
            gradient.bounds.max.y = 1.0
        elif side == Side.TOP:
            gradient.bounds.min.y = 1.0
            gradient.bounds.max.y = 0.0
        elif side == Side.RIGHT:
            gradient.bounds.min.x = 0.0
            gradient.bounds.max.x = 1.0
        elif side == Side.LEFT:
            gradient.bounds.min.x = 1.0
            gradient.bounds.max.x = 0.0


def apply_radial_position(gradient: Gradient, sides: List[Side]) -> None:
    # TODO: compute center and radius from the position instead of only the min bound
    gradient.center = Point()
    gradient.focal = Point()
    gradient.radius = Point()
    for side in sides:
        if side == Side.BOTTOM:
            gradient.bounds.min.y = 0.0
        elif side == Side.TOP:
            gradient.bounds.min.y = 1.0
        elif side == Side.RIGHT:
            gradient.bounds.min.x = 0.0
        elif side == Side.LEFT:
            gradient.bounds.min.x = 1.0


def _linear_geometry(gradient: Gradient, segment: str) -> bool:
    if "deg" in segment:
        sides = angle_to_sides(segment)
        if sides is not None:
            apply_linear_sides(gradient, sides)
        return True
    if segment.startswith("to "):
        apply_linear_sides(gradient, parse_sides(segment[3:]))
        return True
    return False


def _radial_geometry(gradient: Gradient, segment: str) -> bool:
    if any(shape.value in segment for shape in Shape):
        gradient.center = Point(0.5, 0.5)
        gradient.focal = Point(0.5, 0.5)
        gradient.set_radius(0.5)
        return True
    if segment.startswith("at "):
        apply_radial_position(gradient, parse_sides(segment[3:]))
        return True
    return False


def _parse_arguments(
    paint: Paint,
    gradient: Gradient,
    params: str,
    geometry: Callable[[Gradient, str], bool],
    resolver: ColorResolver,
) -> int:
    """Walk the argument list, filling geometry and stops; returns the stop count."""
    stop_idx = 0
    prev_color = paint.solid
    for raw in split_arguments(params):
        segment = raw.strip().rstrip(",")
        if geometry(gradient, segment):
            continue
        if segment.startswith(")"):
            break
        stop = parse_color_stop(segment, prev_color, resolver)
        if stop is None:
            continue
        if stop_idx < len(gradient.stops):
            gradient.stops[stop_idx] = stop
        else:
            gradient.stops.append(stop)
        if stop_idx == 0:
            paint.solid = stop.color  # keep first one
        prev_color = stop.color
        stop_idx += 1
    del gradient.stops[stop_idx:]
    return stop_idx


def parse_linear_gradient(paint: Paint, gradient: Gradient, params: str,
                          resolver: ColorResolver = resolve_color) -> int:
    """Parse ``linear-gradient`` arguments into ``gradient``; returns the stop count."""
    return _parse_arguments(paint, gradient, params, _linear_geometry, resolver)


def parse_radial_gradient(paint: Paint, gradient: Gradient, params: str,
                          resolver: ColorResolver = resolve_color) -> int:
    """Parse ``radial-gradient`` arguments into ``gradient``; returns the stop count."""
    return _parse_arguments(paint, gradient, params, _radial_geometry, resolver)


def _first_stop_color(stops: List[Stop], default: ColorRGBA) -> ColorRGBA:
    return stops[0].color if stops else default


def parse_css(
    descriptor: str,
    base_color: ColorRGBA = BLACK,
    url_resolver: Optional[UrlResolver] = None,
    *,
    resolver: ColorResolver = resolve_color,
    use_cache: bool = False,
) -> Tuple[Paint, bool]:
    """
    Parse a CSS paint value: a gradient function, a ``url(...)`` reference
    or a plain color.

    Args:
        descriptor: CSS value, e.g. ``"radial-gradient(circle, red, blue)"``
        base_color: Current solid color; the first stop's previous color
        url_resolver: Looks up ``url(...)`` references
        resolver: Color resolver for stop and plain colors
        use_cache: Memoize parsed gradients in the shared GradientCache;
            ignored when a custom ``resolver`` is given

    Returns:
        (paint, ok). ``ok`` is False when a ``url(...)`` reference could not
        be resolved (the paint is then solid black) or the gradient had no
        argument list.

    Raises:
        ColorResolveError: If a plain (non-gradient) color is not a color
    """
    paint = Paint(solid=base_color)
    text = descriptor.strip()
    if text.startswith("url("):
        gradient = url_resolver(text) if url_resolver is not None else None
        if gradient is not None:
            gradient = gradient.copy()
            return Paint(solid=_first_stop_color(gradient.stops, base_color), gradient=gradient), True
        _warn(f"unable to find url: {text}")
        return Paint(solid=BLACK, gradient=None), False

    text = text.lower()
    gidx = text.find(GRADIENT_MARKER)
    if gidx <= 0:
        paint.solid = resolver(text, base_color)
        return paint, True

    # cached paints hold colors from the default resolver only
    cache = get_cache() if use_cache and resolver is resolve_color else None
    if cache is not None:
        cached = cache.get(base_color, text)
        if cached is not None:
            return cached, True

    rest = text[gidx + len(GRADIENT_MARKER):]
    pidx = rest.find("(")
    if pidx < 0:
        _warn(f"gradient parameters not found: {text}")
        return paint, False
    params = rest[pidx + 1:]
    if params.endswith(");"):
        params = params[:-2]
    elif params.endswith(")"):
        params = params[:-1]

    gradient_type = enum_or_none(GradientType, text[:gidx])
    if gradient_type is None:
        _warn(f"unsupported gradient type: {text[:gidx]!r}")
        return paint, True

    gradient = Gradient(kind=gradient_type.kind)
    if gradient_type.repeating:
        gradient.spread = Spread.REPEAT
    paint.gradient = gradient
    if gradient.is_radial:
        parse_radial_gradient(paint, gradient, params, resolver)
    else:
        parse_linear_gradient(paint, gradient, params, resolver)
    fix_gradient_stops(gradient.stops)

    if cache is not None:
        cache.put(base_color, text, paint)
    return paint, True
