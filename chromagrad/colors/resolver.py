"""Color token resolution.

Named colors, hex and functional notations are delegated to Pillow's
``ImageColor``; the relative forms (``clearer-N``, ``opaquer-N``,
``lighter-N``, ``darker-N``) and ``currentcolor`` are applied to a base color
supplied by the caller.
"""
from __future__ import annotations
from typing import Callable, Dict, Optional
from PIL import ImageColor

from ..errors import ColorResolveError
from .rgb import ColorRGBA, BLACK, NIL

ColorResolver = Callable[[str, Optional[ColorRGBA]], ColorRGBA]


def _clearer(base: ColorRGBA, pct: float) -> ColorRGBA:
    return base.with_alpha(base.alpha - 255 * pct / 100)


def _opaquer(base: ColorRGBA, pct: float) -> ColorRGBA:
    return base.with_alpha(base.alpha + 255 * pct / 100)


def _lighter(base: ColorRGBA, pct: float) -> ColorRGBA:
    r, g, b, a = base.value
    mix = pct / 100
    return ColorRGBA((r + (255 - r) * mix, g + (255 - g) * mix, b + (255 - b) * mix, a))


def _darker(base: ColorRGBA, pct: float) -> ColorRGBA:
    r, g, b, a = base.value
    keep = 1 - pct / 100
    return ColorRGBA((r * keep, g * keep, b * keep, a))


RELATIVE_MODIFIERS: Dict[str, Callable[[ColorRGBA, float], ColorRGBA]] = {
    "clearer-": _clearer,
    "opaquer-": _opaquer,
    "lighter-": _lighter,
    "darker-": _darker,
}


def _relative_amount(token: str, prefix: str) -> float:
    amount = token[len(prefix):].strip().rstrip("%")
    try:
        return float(amount)
    except ValueError:
        raise ColorResolveError(f"invalid amount in relative color {token!r}") from None


def resolve_color(token: str, base: Optional[ColorRGBA] = None) -> ColorRGBA:
    """
    Resolve a color token to an RGBA value.

    Args:
        token: Color name, hex string, functional notation or relative form
        base: Contextual color for ``currentcolor`` and the relative forms

    Returns:
        Resolved ColorRGBA

    Raises:
        ColorResolveError: If the token is not a color Pillow or the relative
            forms understand
    """
    name = token.strip().lower()
    if not name:
        raise ColorResolveError("empty color string")
    if name == "transparent":
        return NIL
    if base is None or base.is_nil:
        base = BLACK
    if name == "currentcolor":
        return base
    for prefix, modifier in RELATIVE_MODIFIERS.items():
        if name.startswith(prefix):
            return modifier(base, _relative_amount(name, prefix))
    try:
        return ColorRGBA(ImageColor.getrgb(name))
    except ValueError as e:
        raise ColorResolveError(f"invalid color string {token!r}: {e}") from None
