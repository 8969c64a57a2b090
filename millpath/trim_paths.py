"""Removal of backtrack segments from toolpaths.

A toolpath is a pair ``(points, reversible)``.  Backtracks are two-point
toolpaths that were added to make a Eulerian circuit; only a Eulerian path is
needed, so the longest stretches of backtracks found on the toolpaths are
dropped again.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from millpath.geometry import distance

Toolpath = tuple  # (list of points, reversible flag)


def _as_points(linestring: Iterable[Sequence[float]]) -> list:
    return [tuple(point) for point in linestring]


def _take_segment(start: tuple, end: tuple, haystack: Counter) -> bool:
    """Remove the segment start-end from haystack if it is there.

    A directed match is preferred; a reversible backtrack matches in either
    direction.
    """
    for key in (((start, end), False), ((start, end), True), ((end, start), True)):
        if haystack[key] > 0:
            haystack[key] -= 1
            if not haystack[key]:
                del haystack[key]
            return True
    return False


def _longest_middle_run(points: list, backtracks: Counter) -> tuple[float, int, int]:
    """Find the longest run of backtracks inside a loop.

    Returns the run's length and the indices of its first and last vertex.
    """
    last = len(points) - 1
    longest, longest_start, longest_end = 0.0, 0, 0
    current = 0
    while current != last:
        available = Counter(backtracks)
        while current != last and not _take_segment(
                points[current], points[current + 1], available):
            current += 1
        if current == last:
            break
        run_length = distance(points[current], points[current + 1])
        run_start, run_end = current, current + 1
        current += 1
        while current != last and _take_segment(
                points[current], points[current + 1], available):
            run_end = current + 1
            run_length += distance(points[current], points[current + 1])
            current += 1
        if run_length > longest:
            longest, longest_start, longest_end = run_length, run_start, run_end
    return longest, longest_start, longest_end


def _trim_path(points: list, backtracks: Counter) -> list:
    """Return points with backtracks cut off; used backtracks are consumed."""
    if len(points) < 2:
        return points
    available = Counter(backtracks)

    # Index one past the last vertex removable from the start.
    remove_from_start = 0
    length_from_start = 0.0
    for index in range(len(points) - 1):
        if not _take_segment(points[index], points[index + 1], available):
            break
        remove_from_start = index + 1
        length_from_start += distance(points[index], points[index + 1])

    # Index of the first vertex removable from the end.
    remove_from_end = len(points)
    length_from_end = 0.0
    for index in range(len(points) - 1, 0, -1):
        if not _take_segment(points[index - 1], points[index], available):
            break
        remove_from_end = index
        length_from_end += distance(points[index - 1], points[index])

    longest, longest_start, longest_end = 0.0, 0, 0
    if points[0] == points[-1]:
        longest, longest_start, longest_end = _longest_middle_run(points, backtracks)

    if length_from_start + length_from_end > longest:
        for index in range(remove_from_end - 1, len(points) - 1):
            _take_segment(points[index], points[index + 1], backtracks)
        for index in range(remove_from_start):
            _take_segment(points[index], points[index + 1], backtracks)
        trimmed = points[:remove_from_end]
        del trimmed[:remove_from_start]
        return trimmed

    for index in range(longest_start, longest_end):
        _take_segment(points[index], points[index + 1], backtracks)
    # A loop: rotate it so that the removed stretch falls off its ends.
    return points[longest_end:] + points[1:longest_start + 1]


def trim_paths(toolpaths: Iterable[tuple], backtracks: Iterable[tuple]) -> list[tuple]:
    """Return toolpaths with segments matching backtracks removed.

    Backtracks are expected to be straight segments of two vertices.  Paths
    left with fewer than two vertices are dropped.
    """
    paths = [(_as_points(points), reversible) for points, reversible in toolpaths]
    backtrack_list = [(tuple(_as_points(points)), reversible)
                      for points, reversible in backtracks]
    if not backtrack_list:
        return paths
    remaining = Counter(backtrack_list)
    result = []
    for points, reversible in paths:
        points = _trim_path(points, remaining)
        if reversible:
            points = _trim_path(points[::-1], remaining)[::-1]
        result.append((points, reversible))
    return [path for path in result if len(path[0]) >= 2]