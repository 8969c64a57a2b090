"""Toolpath helpers for PCB milling: units, drills, tiling, path trimming and WKT rendering."""

__version__ = "0.1.0"

__all__ = [
    "available_drills",
    "flatten",
    "geometry",
    "mill",
    "parabola",
    "tile",
    "trim_paths",
    "unique_codes",
    "units",
    "wkt_to_svg",
]