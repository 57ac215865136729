from __future__ import annotations
from typing import ClassVar, Tuple
import numpy as np


class ColorRGBA:
    """Immutable 8-bit RGBA color.

    The all-zero value doubles as the "no color yet" sentinel used by the
    color-stop parser (see :data:`NIL`).
    """
    __slots__ = ('_value', '_is_frozen')  # no __dict__ → immutability

    num_channels: ClassVar[int] = 4
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value) -> None:
        if isinstance(value, ColorRGBA):
            value = value.value
        value = tuple(value)
        if len(value) == 3:
            value = value + (self.maxima[3],)
        if len(value) != self.num_channels:
            raise ValueError(f"rgba expects {self.num_channels} channels, got {len(value)}")
        # clamp value
        self._value = tuple(
            max(0, min(int(round(v)), m)) for v, m in zip(value, self.maxima)
        )
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[int, int, int, int]:
        return self._value

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def alpha(self) -> int:
        return self._value[3]

    @property
    def is_nil(self) -> bool:
        return self._value == self.null_value

    @property
    def hex(self) -> str:
        return "#" + "".join(f"{c:02x}" for c in self._value)

    def with_alpha(self, alpha: int) -> ColorRGBA:
        """Return a copy with the alpha channel replaced (clamped to 0-255)."""
        return self.__class__(self._value[:3] + (alpha,))

    def as_unit(self) -> np.ndarray:
        """Channels scaled to 0.0-1.0 as a float32 array."""
        return np.asarray(self._value, dtype=np.float32) / 255.0

    def __eq__(self, other) -> bool:
        if isinstance(other, ColorRGBA):
            return self._value == other._value
        if isinstance(other, tuple):
            return self._value == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self):
        return (self.__class__, (self._value,))

    def __deepcopy__(self, memo) -> ColorRGBA:
        return self

    def __repr__(self) -> str:
        return f"ColorRGBA({self._value!r})"


NIL = ColorRGBA(ColorRGBA.null_value)
BLACK = ColorRGBA((0, 0, 0, 255))
WHITE = ColorRGBA((255, 255, 255, 255))
