import math

from ..errors import FractionError


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def parse_number(text: str) -> float:
    """Parse a finite decimal number, raising FractionError otherwise."""
    try:
        number = float(text.strip())
    except ValueError:
        raise FractionError(f"invalid number: {text!r}") from None
    if not math.isfinite(number):
        raise FractionError(f"invalid number: {text!r}")
    return number


def read_fraction(text: str) -> float:
    """
    Read a plain or percentage number as a fraction.

    ``"50%"`` reads as 0.5 and ``"0.25"`` as 0.25. Negative results are
    clamped to 0; results above 1 are returned unchanged.

    Raises:
        FractionError: If the text is not a number
    """
    value = text.strip()
    divisor = 1.0
    if value.endswith("%"):
        divisor = 100.0
        value = value[:-1]
    fraction = parse_number(value) / divisor
    if fraction < 0:
        fraction = 0.0
    return fraction
