"""
Chromagrad Colors
=================

Immutable 8-bit RGBA colors and the resolver that turns color tokens found
in gradient descriptors into them.

>>> from chromagrad.colors import resolve_color
>>> resolve_color("red").value
(255, 0, 0, 255)
>>> resolve_color("clearer-50", resolve_color("red")).value
(255, 0, 0, 128)
"""

from .rgb import ColorRGBA, NIL, BLACK, WHITE
from .resolver import resolve_color, ColorResolver

__all__ = ['ColorRGBA', 'NIL', 'BLACK', 'WHITE', 'resolve_color', 'ColorResolver']
