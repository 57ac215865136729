from __future__ import annotations
from typing import Optional, Tuple
import warnings

import numpy as np

from ..colors.rgb import ColorRGBA, NIL
from ..colors.resolver import ColorResolver, resolve_color
from ..errors import ColorResolveError, FractionError, GradientWarning
from ..utils.num_utils import parse_number, read_fraction
from .gradient import Stop

CLEARER_PREFIX = "clearer-"
TRANSPARENT = "transparent"


def split_first_word(text: str) -> Tuple[str, Optional[str]]:
    """Split at the first space outside parentheses: ``"rgb(1, 2, 3) 50%"`` -> ``("rgb(1, 2, 3)", "50%")``."""
    depth = 0
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == " " and depth == 0 and i > 0:
            rest = text[i + 1:].strip()
            return text[:i], rest or None
    return text, None


def _is_relative_keyword(token: str) -> bool:
    return token == TRANSPARENT or token.startswith(CLEARER_PREFIX)


def _relative_opacity(token: str) -> float:
    if token == TRANSPARENT:
        return 0.0
    amount = token[len(CLEARER_PREFIX):]
    try:
        pct = parse_number(amount.rstrip("%"))
    except FractionError:
        raise ColorResolveError(f"invalid clearer amount {amount!r}") from None
    return float(np.clip((100.0 - pct) / 100.0, 0.0, 1.0))


def parse_color_stop(
    segment: str,
    prev_color: ColorRGBA = NIL,
    resolver: ColorResolver = resolve_color,
) -> Optional[Stop]:
    """
    Parse one ``<color> [<offset>]`` gradient argument.

    ``clearer-N`` and ``transparent`` keep the previous color and only change
    the stop opacity; an explicit base color may follow them
    (``clearer-50 red 40%``). Any other color token goes to ``resolver`` with
    ``prev_color`` as its contextual base.

    Args:
        segment: Trimmed argument text without its trailing comma
        prev_color: Color of the previous stop, or the paint's solid color
        resolver: Color resolver to use

    Returns:
        The parsed Stop (offset 0 when none was given), or None when the
        segment was rejected; a GradientWarning says why.
    """
    token, rest = split_first_word(segment.strip())
    stop = Stop(offset=0.0, color=prev_color, opacity=1.0)
    try:
        if _is_relative_keyword(token):
            stop.opacity = _relative_opacity(token)
            if rest is not None:
                try:
                    stop.offset = read_fraction(rest)
                except FractionError:
                    # not an offset, so it names the base color
                    color_text, offset_text = split_first_word(rest)
                    stop.color = resolver(color_text, prev_color)
                    if offset_text is not None:
                        stop.offset = read_fraction(offset_text)
        else:
            if rest is not None:
                stop.offset = read_fraction(rest)
            stop.color = resolver(token, prev_color)
    except FractionError as e:
        warnings.warn(f"invalid color stop offset in {segment!r}: {e}", GradientWarning, stacklevel=2)
        return None
    except ValueError as e:
        warnings.warn(f"invalid color stop {segment!r}: {e}", GradientWarning, stacklevel=2)
        return None
    return stop
