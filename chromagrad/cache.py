"""
Process-wide memo of parsed CSS gradient paints.

Keys combine the caller's solid color with the lower-cased descriptor, since
the solid color seeds the first stop. Entries are deep copies both ways, so a
cached paint is never shared with a caller. Growth is unbounded.

Concurrent parses of the same descriptor may both insert; the last writer
wins and readers always see a complete entry.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Optional, Tuple
import threading

from .colors.rgb import ColorRGBA

if TYPE_CHECKING:
    from .gradients.gradient import Paint

CacheKey = Tuple[str, str]


class GradientCache:
    __slots__ = ('_entries', '_lock')

    def __init__(self) -> None:
        self._entries: Dict[CacheKey, Paint] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(solid: ColorRGBA, descriptor: str) -> CacheKey:
        return (solid.hex, descriptor)

    def get(self, solid: ColorRGBA, descriptor: str) -> Optional[Paint]:
        with self._lock:
            paint = self._entries.get(self.key(solid, descriptor))
        return paint.copy() if paint is not None else None

    def put(self, solid: ColorRGBA, descriptor: str, paint: Paint) -> None:
        entry = paint.copy()
        with self._lock:
            self._entries[self.key(solid, descriptor)] = entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._entries


_cache: Optional[GradientCache] = None
_cache_lock = threading.Lock()


def get_cache() -> GradientCache:
    """Return the shared cache, creating it on first use."""
    global _cache
    if _cache is None:
        with _cache_lock:
            if _cache is None:
                _cache = GradientCache()
    return _cache
