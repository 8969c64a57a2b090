"""Plain geometric types and helpers.

Points are ``(x, y)`` tuples, linestrings are lists of points and boxes are
``(min_corner, max_corner)`` pairs.
"""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Iterable, Sequence, Tuple

# Size of SVG output (width and height) in pixels per inch.
SVG_PIX_PER_IN = 96
# Resolution of SVG output (viewBox) in dots per inch.
SVG_DOTS_PER_IN = 2000

Point = Tuple[float, float]
Linestring = list
Box = Tuple[Point, Point]


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def linestring_length(linestring: Iterable[Sequence[float]]) -> float:
    """Total length of the segments of a linestring."""
    return sum(distance(a, b) for a, b in pairwise(linestring))


def bounding_box(points: Iterable[Sequence[float]]) -> Box:
    """Smallest axis-aligned box holding all points."""
    points = list(points)
    if not points:
        raise ValueError("bounding box of no points")
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (min(xs), min(ys)), (max(xs), max(ys))