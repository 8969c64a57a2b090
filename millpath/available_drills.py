"""Drill bits that are on hand, each usable for a range of hole sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from millpath.units import (
    CommaSeparated,
    InvalidOptionValue,
    Length,
    UnitsParseError,
    parse_unit,
)


def _unbounded_below() -> Length:
    return Length(-math.inf)


def _unbounded_above() -> Length:
    return Length(math.inf)


@dataclass
class AvailableDrill:
    """A drill diameter with how far below and above it holes may be drilled.

    The negative tolerance is never positive and the positive tolerance is
    never negative.  Without tolerances the drill fits any hole.
    """

    diameter: Length = field(default_factory=Length)
    negative_tolerance: Length = field(default_factory=_unbounded_below)
    positive_tolerance: Length = field(default_factory=_unbounded_above)

    @classmethod
    def parse(cls, text: str) -> "AvailableDrill":
        """Read ``diameter[:tolerance[:tolerance]]``.

        A single tolerance applies in both directions.
        """
        try:
            return cls._parse(text)
        except UnitsParseError as error:
            raise InvalidOptionValue(text) from error

    @classmethod
    def _parse(cls, text: str) -> "AvailableDrill":
        parts = text.split(":")
        if len(parts) > 3:
            raise UnitsParseError("Too many parts in " + text)
        negative = _unbounded_below()
        positive = _unbounded_above()
        if len(parts) == 3:
            positive = parse_unit(Length, parts[2])
        if len(parts) >= 2:
            negative = parse_unit(Length, parts[1])
        diameter = parse_unit(Length, parts[0])
        if len(parts) == 2:
            positive = -negative
        if positive.as_inch(1) < 0 or negative.as_inch(1) > 0:
            positive, negative = negative, positive
        if positive.as_inch(1) < 0 or negative.as_inch(1) > 0:
            raise UnitsParseError(
                "One tolerance must be negative and one must be positive")
        return cls(diameter, negative, positive)

    def __str__(self) -> str:
        if (self.negative_tolerance == _unbounded_below()
                and self.positive_tolerance == _unbounded_above()):
            return str(self.diameter)
        return f"{self.diameter}:{self.negative_tolerance}:+{self.positive_tolerance}"

    def difference(self, wanted_diameter: Length, input_factor: float) -> float | None:
        """Distance in inches from the wanted diameter, or None if out of range."""
        wanted = wanted_diameter.as_inch(input_factor)
        diameter = self.diameter.as_inch(input_factor)
        low = diameter + self.negative_tolerance.as_inch(input_factor)
        high = diameter + self.positive_tolerance.as_inch(input_factor)
        if low <= wanted <= high:
            return abs(wanted - diameter)
        return None


def parse_available_drills(text: str) -> CommaSeparated:
    """Read a comma-separated list of drills."""
    return CommaSeparated.parse(text, AvailableDrill.parse)