"""Approximation of parabolic Voronoi edges by straight segments.

A parabolic edge lies between one input point and one input segment.
"""

from __future__ import annotations

from typing import Sequence


def _parabola_y(x: float, a: float, b: float) -> float:
    return ((x - a) * (x - a) + b * b) / (b + b)


def discretize(point: Sequence[float], segment: Sequence[Sequence[float]],
               max_dist: float, discretization: Sequence[Sequence[float]]) -> list:
    """Return points along the parabola between the two given edge endpoints.

    ``discretization`` holds the edge's start and end points; the result starts
    and ends with them.  No part of the parabola is further than max_dist from
    the returned polyline.
    """
    if len(discretization) != 2:
        raise ValueError("discretization must hold exactly the two edge endpoints")
    start, end = (tuple(p) for p in discretization)
    (x0, y0), (x1, y1) = segment

    # Move the segment start to the origin and its direction onto the x-axis.
    segm_vec_x = x1 - x0
    segm_vec_y = y1 - y0
    sqr_segment_length = segm_vec_x * segm_vec_x + segm_vec_y * segm_vec_y
    if sqr_segment_length == 0:
        raise ValueError("segment has zero length")

    def projection(p: Sequence[float]) -> float:
        return segm_vec_x * (p[0] - x0) + segm_vec_y * (p[1] - y0)

    projection_start = projection(start)
    projection_end = projection(end)

    point_vec_x = point[0] - x0
    point_vec_y = point[1] - y0
    rot_x = segm_vec_x * point_vec_x + segm_vec_y * point_vec_y
    rot_y = segm_vec_x * point_vec_y - segm_vec_y * point_vec_x
    if rot_y == 0:
        raise ValueError("point lies on the line of the segment")

    result = [start]
    if projection_start == projection_end:
        result.append(end)
        return result

    stack = [projection_end]
    cur_x = projection_start
    cur_y = _parabola_y(cur_x, rot_x, rot_y)
    max_dist_transformed = max_dist * max_dist * sqr_segment_length
    while stack:
        new_x = stack[-1]
        new_y = _parabola_y(new_x, rot_x, rot_y)

        # The point of the arc furthest from the chord.
        mid_x = (new_y - cur_y) / (new_x - cur_x) * rot_y + rot_x
        mid_y = _parabola_y(mid_x, rot_x, rot_y)

        dist = (new_y - cur_y) * (mid_x - cur_x) - (new_x - cur_x) * (mid_y - cur_y)
        dist = dist * dist / ((new_y - cur_y) ** 2 + (new_x - cur_x) ** 2)
        if dist <= max_dist_transformed:
            stack.pop()
            inter_x = (segm_vec_x * new_x - segm_vec_y * new_y) / sqr_segment_length + x0
            inter_y = (segm_vec_x * new_y + segm_vec_y * new_x) / sqr_segment_length + y0
            result.append((inter_x, inter_y))
            cur_x, cur_y = new_x, new_y
        else:
            stack.append(mid_x)

    result[-1] = end
    return result