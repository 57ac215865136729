from __future__ import annotations
from typing import List, Optional
import numpy as np

from .gradient import Stop


def _distribute(stops: List[Stop], split_start: int, end_index: int) -> None:
    """Spread stops[split_start:end_index] evenly between their neighbours' offsets."""
    start = stops[split_start].offset
    end = stops[end_index].offset
    count = end_index - split_start
    # linspace includes both ends; the run gets the interior points
    for stop, offset in zip(stops[split_start:end_index], np.linspace(start, end, count + 2)[1:-1]):
        stop.offset = float(offset)


def fix_gradient_stops(stops: List[Stop]) -> List[Stop]:
    """
    Apply the CSS3 color-stop fixup rules in place.

    An offset of 0 on any stop after the first means "unspecified". The last
    stop defaults to 1.0 (or to the largest offset seen so far when that is
    already past 1.0), runs of unspecified interior stops are spaced evenly
    between the explicit stops around them, and an explicit offset smaller
    than an earlier one is raised to it.

    Args:
        stops: Stops in source order; offsets are rewritten in place

    Returns:
        The same list, for chaining
    """
    size = len(stops)
    if size == 0:
        return stops
    split_start: Optional[int] = None
    last = 0.0
    for i, stop in enumerate(stops):
        if i == size - 1 and stop.offset == 0:
            stop.offset = 1.0 if last < 1.0 else last
        if i > 0 and stop.offset == 0:
            if split_start is None:
                split_start = i
                stop.offset = last
            continue
        if i > 0 and stop.offset < last:
            stop.offset = last
        if split_start is not None:
            _distribute(stops, split_start, i)
            split_start = None
        last = stop.offset
    return stops
