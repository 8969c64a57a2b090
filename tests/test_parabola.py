import math

import pytest

from millpath.parabola import discretize

FOCUS = (0.0, 1.0)
SEGMENT = ((-10.0, 0.0), (10.0, 0.0))
ENDS = [(-2.0, 2.5), (2.0, 2.5)]


def test_keeps_endpoints():
    result = discretize(FOCUS, SEGMENT, 0.1, ENDS)
    assert result[0] == ENDS[0]
    assert result[-1] == ENDS[1]


def test_points_lie_on_parabola():
    result = discretize(FOCUS, SEGMENT, 0.01, ENDS)
    for x, y in result:
        # Equidistant from the focus and from the x-axis.
        assert math.hypot(x - FOCUS[0], y - FOCUS[1]) == pytest.approx(abs(y))


def test_points_advance_along_segment():
    result = discretize(FOCUS, SEGMENT, 0.01, ENDS)
    xs = [x for x, _ in result]
    assert xs == sorted(xs)
    assert len(set(xs)) == len(xs)


def test_smaller_tolerance_gives_more_points():
    coarse = discretize(FOCUS, SEGMENT, 1.0, ENDS)
    fine = discretize(FOCUS, SEGMENT, 0.001, ENDS)
    assert len(fine) > len(coarse)


def test_vertical_segment():
    focus = (1.0, 0.0)
    segment = ((0.0, -10.0), (0.0, 10.0))
    ends = [(2.5, -2.0), (2.5, 2.0)]
    result = discretize(focus, segment, 0.01, ends)
    assert result[0] == ends[0] and result[-1] == ends[1]
    for x, y in result:
        assert math.hypot(x - focus[0], y - focus[1]) == pytest.approx(abs(x))


def test_degenerate_segment_raises():
    with pytest.raises(ValueError):
        discretize(FOCUS, ((1.0, 1.0), (1.0, 1.0)), 0.1, ENDS)


def test_point_on_segment_line_raises():
    with pytest.raises(ValueError):
        discretize((0.0, 0.0), SEGMENT, 0.1, ENDS)


def test_requires_two_endpoints():
    with pytest.raises(ValueError):
        discretize(FOCUS, SEGMENT, 0.1, ENDS[:1])