"""Repeating one board's program several times in a grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, TextIO

from millpath.units import Software

_CALL_SUB = {
    Software.LINUXCNC: "o{var} call",
    Software.MACH3: "M98 P{var}",
    Software.MACH4: "M98 P{var}",
}
_SET_X0 = {
    Software.LINUXCNC: "G92 X[#5420-[{value:f}]]",
    Software.MACH3: "G00 X{value:f}\nG92 X0",
    Software.MACH4: "G00 X{value:f}\nG92 X0",
}
_SET_Y0 = {
    Software.LINUXCNC: "G92 Y[#5421-[{value:f}]]",
    Software.MACH3: "G00 Y{value:f}\nG92 Y0",
    Software.MACH4: "G00 Y{value:f}\nG92 Y0",
}
_MACH = (Software.MACH3, Software.MACH4)


@dataclass
class TileInfo:
    """How a board is repeated and how the controller is told to do it."""

    software: Software
    enabled: bool
    tile_x: int
    tile_y: int
    board_width: float
    board_height: float
    for_x_num: int
    for_y_num: int


@dataclass
class Tiling:
    """Writes the code that wraps a board's program for tiling."""

    tile_info: TileInfo
    cfactor: float
    tile_var: int
    gcode_end: str = ""

    def header(self, out: TextIO) -> None:
        info = self.tile_info
        if not info.enabled:
            return
        if info.software is Software.LINUXCNC:
            out.write(f"\no{self.tile_var} sub ( Main subroutine )\n\n")
        elif info.software in _MACH:
            self._tile_sequence(out)
            out.write(f"{self.gcode_end}\nO{self.tile_var} ( Main subroutine )\n\n")

    def footer(self, out: TextIO) -> None:
        info = self.tile_info
        if info.enabled:
            if info.software is Software.LINUXCNC:
                out.write(f"\no{self.tile_var} endsub\n\n")
                self._tile_sequence(out)
                out.write(self.gcode_end)
            elif info.software in _MACH:
                out.write("\nM99\n\n")
        if not info.enabled or info.software is Software.CUSTOM:
            out.write(self.gcode_end)

    def _tile_sequence(self, out: TextIO) -> None:
        info = self.tile_info
        call = _CALL_SUB[info.software].format(var=self.tile_var)
        set_x0 = _SET_X0[info.software]
        set_y0 = _SET_Y0[info.software]
        width = info.board_width * self.cfactor
        height = info.board_height * self.cfactor

        for row in range(info.tile_y):
            out.write(call + "\n")
            step = width if row % 2 == 0 else -width
            for _ in range(info.tile_x - 1):
                out.write(set_x0.format(value=step) + "\n")
                out.write(call + "\n")
            if row < info.tile_y - 1:
                out.write(set_y0.format(value=height) + "\n")

        out.write(set_y0.format(value=-height * (info.tile_y - 1)) + "\n")
        if info.tile_y % 2:
            out.write(set_x0.format(value=-width * (info.tile_x - 1)) + "\n")

    @staticmethod
    def generate_tile_info(options: Mapping, board_height: float,
                           board_width: float) -> TileInfo:
        """Build a TileInfo from the ``tile-x``, ``tile-y`` and ``software`` options."""
        tile_x = int(options["tile-x"])
        tile_y = int(options["tile-y"])
        software = options.get("software")
        if software is None:
            software = Software.CUSTOM
        if software is Software.CUSTOM:
            for_x_num, for_y_num = tile_x, tile_y
        else:
            for_x_num, for_y_num = 1, 1
        return TileInfo(
            software=software,
            enabled=tile_x > 1 or tile_y > 1,
            tile_x=tile_x,
            tile_y=tile_y,
            board_width=board_width,
            board_height=board_height,
            for_x_num=for_x_num,
            for_y_num=for_y_num,
        )