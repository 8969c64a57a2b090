[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "millpath"
version = "0.1.0"
description = "Toolpath helpers for PCB milling: unit parsing, drill selection, tiling, path trimming and WKT rendering"
requires-python = ">=3.10"
keywords = ["pcb", "gcode", "cnc", "milling", "toolpath", "wkt", "svg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Manufacturing",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]
dependencies = [
    "shapely",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
millpath-wkt-to-svg = "millpath.wkt_to_svg:main"

[tool.hatch.build.targets.wheel]
packages = ["millpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
