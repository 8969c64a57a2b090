import io
import re

import pytest

from millpath.wkt_to_svg import main, wkt_lines_to_svg


def polylines(svg):
    return [[tuple(int(v) for v in pair.split(",")) for pair in points.split()]
            for points in re.findall(r'<polyline points="([^"]*)"', svg)]


def test_view_box():
    svg = wkt_lines_to_svg(["LINESTRING(0 0, 10 10)"])
    assert 'viewBox="0 0 28000 28000"' in svg
    assert svg.rstrip().endswith("</svg>")


def test_linestring_fills_view():
    svg = wkt_lines_to_svg(["LINESTRING(0 0, 10 10)"])
    assert '<polyline points="0,28000 28000,0"' in svg
    assert "stroke-opacity:0.3" in svg


def test_multilinestring_draws_each_line():
    svg = wkt_lines_to_svg(["MULTILINESTRING((0 0, 1 1), (2 2, 3 3))"])
    assert len(polylines(svg)) == 2


def test_polygons_are_filled_red():
    svg = wkt_lines_to_svg(
        ["MULTIPOLYGON(((0 0, 0 1, 1 1, 1 0, 0 0)), ((2 2, 2 3, 3 3, 3 2, 2 2)))",
         "POLYGON((0 0, 0 1, 1 1, 0 0))"])
    assert svg.count("fill:red") == 3
    assert svg.count("<path ") == 3


def test_stops_at_empty_line():
    svg = wkt_lines_to_svg(["LINESTRING(0 0, 1 1)", "", "LINESTRING(0 0, 2 2)"])
    assert len(polylines(svg)) == 1


def test_scale_fixed_by_first_geometry():
    svg = wkt_lines_to_svg(["LINESTRING(0 0, 10 10)", "LINESTRING(0 0, 20 20)"])
    first, second = polylines(svg)
    assert first[0] == second[0]
    assert second[1][0] == 2 * first[1][0]


def test_invalid_wkt_raises():
    with pytest.raises(ValueError):
        wkt_lines_to_svg(["POLYGON((0 0, 1"])


def test_unexpected_geometry_raises():
    with pytest.raises(ValueError):
        wkt_lines_to_svg(["POINT(1 1)"])


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("LINESTRING(0 0, 5 5)\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<?xml")
    assert len(polylines(out)) == 1