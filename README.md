# millpath

Building blocks for turning PCB artwork into milling toolpaths.

## Modules

- `millpath.units`: parses lengths, times, revolutions, velocities, rpm and
  percentages written with units (`"25.4mm"`, `"600 cycles / minute"`,
  `"2rotations/s"`). A value given without units is multiplied by a
  caller-supplied factor when converted. Also parses `BoardSide`, `Software`
  and `MillFeedDirection`, and comma-separated lists (`CommaSeparated`).
  Bad input raises `InvalidOptionValue`; comparing a value that has units
  with one that has none raises `ComparisonError`.
- `millpath.available_drills`: drill sizes with optional tolerances, such as
  `"1mm:+0.1mm:-0.2mm"`, and `AvailableDrill.difference`, which tells how far
  a wanted hole is from a drill, or `None` if the drill does not fit it.
- `millpath.unique_codes`: `UniqueCodes`, a counter that hands out
  increasing codes.
- `millpath.mill`: settings dataclasses `Mill`, `RoutingMill`, `Isolator`,
  `Cutter` and `Driller`.
- `millpath.tile`: `Tiling` writes the G-code subroutine calls that repeat one
  board across a grid, for LinuxCNC, Mach3, Mach4 or custom (plain) output.
- `millpath.trim_paths`: `trim_paths` removes backtracking segments from
  toolpaths.
- `millpath.parabola`: `discretize` splits a parabolic arc between a point and
  a segment into straight pieces within a given error.
- `millpath.geometry`: `distance`, `linestring_length` and `bounding_box` on
  plain `(x, y)` tuples.
- `millpath.flatten`: `flatten` joins nested lists into one.
- `millpath.wkt_to_svg`: renders WKT geometry to SVG.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Parsing units:

```python
from millpath.units import Length, Velocity, parse_unit

parse_unit(Length, "25.4mm").as_inch(1)    # one inch
parse_unit(Length, "4").as_inch(2)         # 8.0: no units, so the factor applies
parse_unit(Velocity, "50.8 mm per min").as_inch_per_minute(1)  # two inches per minute
```

Available drills:

```python
from millpath.available_drills import parse_available_drills

drills = parse_available_drills("1inch:0.1inches")
str(drills)   # "0.0254 m:-0.00254 m:+0.00254 m"
```

Trimming backtracks off a toolpath. A toolpath is a pair of a point list and
a flag saying whether it may be run in reverse:

```python
from millpath.trim_paths import trim_paths

paths = [([(1, 2), (3, 4), (5, 6), (7, 8)], True)]
backtracks = [([(1, 2), (3, 4)], True)]
trim_paths(paths, backtracks)   # [([(3, 4), (5, 6), (7, 8)], True)]
```

Writing the tiling wrapper for a board:

```python
import io
from millpath.tile import Tiling
from millpath.units import Software

info = Tiling.generate_tile_info(
    {"tile-x": 2, "tile-y": 2, "software": Software.LINUXCNC}, 30.0, 50.0)
tiling = Tiling(info, cfactor=1.0, tile_var=7, gcode_end="M30\n")
out = io.StringIO()
tiling.header(out)
# ... the board's own G-code goes here ...
tiling.footer(out)
```

## Rendering WKT to SVG

`millpath-wkt-to-svg` reads one WKT geometry per line from standard input and
writes an SVG picture to standard output. Lines that start with
`MULTILINESTRING` or `LINESTRING` are drawn as strokes; every other line is read
as a polygon or multipolygon and filled. An empty line ends the input.

```
millpath-wkt-to-svg < shapes.wkt > shapes.svg
```

## What it does not do

millpath is a set of pieces, not a complete converter. It does not read Gerber
or Excellon files, does not build isolation or Voronoi outlines, does not
choose the order in which holes or paths are visited, and does not write a
board's milling or drilling G-code; only the tiling wrapper around such code
is produced here.