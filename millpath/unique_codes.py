"""Source of increasing numeric codes."""

from __future__ import annotations


class UniqueCodes:
    """Hands out successive integers starting from a given value."""

    def __init__(self, start: int) -> None:
        self._current = start

    def next_code(self) -> int:
        code = self._current
        self._current += 1
        return code