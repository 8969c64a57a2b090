"""Draw WKT geometries, one per line, as an SVG image."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import LineString, MultiLineString, MultiPolygon, Polygon

from millpath.geometry import SVG_DOTS_PER_IN

_LINE_STYLE = ("stroke:rgb(0,0,0);stroke-width:10;fill:none;"
               "stroke-opacity:0.3;stroke-linecap:round;stroke-linejoin:round;")
_POLYGON_STYLE = ("stroke:rgb(0,0,0);stroke-width:10;fill:red;"
                  "stroke-opacity:1;stroke-linecap:round;stroke-linejoin:round;")
# Side of the drawing area in inches.
_EXTENT = 14


class _SvgMapper:
    """Maps geometries into an SVG of a given size, y axis pointing up.

    The transformation is fixed by the geometries added before the first
    one is mapped.
    """

    def __init__(self, width: float, height: float, attributes: str) -> None:
        self.width = width
        self.height = height
        self.attributes = attributes
        self._bounds: tuple[float, float, float, float] | None = None
        self._transform: tuple[float, float, float] | None = None
        self._elements: list[str] = []

    def add(self, geometry) -> None:
        if geometry.is_empty:
            return
        minx, miny, maxx, maxy = geometry.bounds
        if self._bounds is None:
            self._bounds = (minx, miny, maxx, maxy)
        else:
            bx0, by0, bx1, by1 = self._bounds
            self._bounds = (min(bx0, minx), min(by0, miny), max(bx1, maxx), max(by1, maxy))

    def _point(self, x: float, y: float) -> str:
        if self._transform is None:
            if self._bounds is None:
                self._transform = (0.0, 0.0, 1.0)
            else:
                minx, miny, maxx, maxy = self._bounds
                scales = []
                if maxx > minx:
                    scales.append(self.width / (maxx - minx))
                if maxy > miny:
                    scales.append(self.height / (maxy - miny))
                self._transform = (minx, miny, min(scales) if scales else 1.0)
        minx, miny, scale = self._transform
        return f"{round((x - minx) * scale)},{round(self.height - (y - miny) * scale)}"

    def map_linestrings(self, lines: Iterable[LineString], style: str) -> None:
        for line in lines:
            points = " ".join(self._point(x, y) for x, y in line.coords)
            self._elements.append(f'<polyline points="{points}" style="{style}"/>')

    def map_polygons(self, polygons: Iterable[Polygon], style: str) -> None:
        for polygon in polygons:
            rings = [polygon.exterior, *polygon.interiors]
            parts = []
            for ring in rings:
                coords = [self._point(x, y) for x, y in ring.coords]
                if coords:
                    parts.append("M" + coords[0] + " L" + " ".join(coords[1:]) + " z")
            path = " ".join(parts)
            self._elements.append(
                f'<path d="{path}" style="fill-rule:evenodd;{style}"/>')

    def render(self) -> str:
        header = ('<?xml version="1.0" standalone="no"?>\n'
                  '<svg width="100%" height="100%" version="1.1" '
                  f'xmlns="http://www.w3.org/2000/svg" {self.attributes}>\n')
        return header + "".join(element + "\n" for element in self._elements) + "</svg>\n"


def _load(text: str, expected: tuple, wrap=None):
    try:
        geometry = wkt.loads(text)
    except ShapelyError as error:
        raise ValueError(f"invalid WKT: {text}") from error
    if wrap is not None and isinstance(geometry, wrap[0]):
        geometry = wrap[1]([geometry])
    if not isinstance(geometry, expected):
        raise ValueError(f"unexpected geometry type in: {text}")
    return geometry


def wkt_lines_to_svg(lines: Iterable[str]) -> str:
    """Render WKT lines as SVG, stopping at the first empty line."""
    view_width = _EXTENT * SVG_DOTS_PER_IN
    view_height = _EXTENT * SVG_DOTS_PER_IN
    mapper = _SvgMapper(view_width, view_height,
                        f'viewBox="0 0 {view_width:g} {view_height:g}"')
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            break
        if line.startswith("MULTILINESTRING"):
            geometry = _load(line, (MultiLineString,))
            mapper.add(geometry)
            mapper.map_linestrings(geometry.geoms, _LINE_STYLE)
        elif line.startswith("LINESTRING"):
            geometry = _load(line, (LineString,))
            mapper.add(geometry)
            mapper.map_linestrings([geometry], _LINE_STYLE)
        else:
            geometry = _load(line, (MultiPolygon,), wrap=(Polygon, MultiPolygon))
            mapper.add(geometry)
            mapper.map_polygons(geometry.geoms, _POLYGON_STYLE)
    return mapper.render()


def main(argv=None) -> int:
    """Read WKT from standard input and write SVG to standard output."""
    parser = argparse.ArgumentParser(
        description="Draw WKT geometries read from standard input as SVG.")
    parser.parse_args(argv)
    sys.stdout.write(wkt_lines_to_svg(sys.stdin))
    return 0