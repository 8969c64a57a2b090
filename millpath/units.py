"""Physical quantities given on the command line: lengths, times, speeds.

A value may be written with or without a unit.  Values without a unit are
scaled by a caller-supplied factor when converted; values with a unit are
converted exactly.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass, field
from enum import Enum
from itertools import chain
from typing import Callable, ClassVar, Iterable, Iterator

INCH = 0.0254  # metres
THOU = INCH / 1000.0  # metres
MINUTE = 60.0  # seconds

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LETTERS = frozenset(string.ascii_letters)
_NUMBER_CHARS = frozenset(string.digits + "-.+")


class UnitsParseError(ValueError):
    """A piece of a quantity could not be read."""

    def __init__(self, what: str, source: str | None = None) -> None:
        message = what if source is None else f"Can't get {what} from: {source}"
        super().__init__(message)


class ComparisonError(Exception):
    """Two quantities cannot be compared because only one has units."""


class InvalidOptionValue(ValueError):
    """An option value is not acceptable."""


class Lexer:
    """Reads successive numbers, words and symbols from a string."""

    def __init__(self, text: str) -> None:
        self.pos = 0
        self._input = text

    def _take_while(self, allowed: frozenset) -> str:
        start = self.pos
        while self.pos < len(self._input) and self._input[self.pos] in allowed:
            self.pos += 1
        return self._input[start:self.pos]

    def _take_exact(self, token: str) -> bool:
        if self._input.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def get_whitespace(self) -> str:
        return self._take_while(_WHITESPACE)

    def get_word(self) -> str:
        self.get_whitespace()
        return self._take_while(_LETTERS)

    def get_double(self) -> float:
        self.get_whitespace()
        text = self._take_while(_NUMBER_CHARS)
        try:
            return float(text)
        except ValueError:
            raise UnitsParseError("double", text) from None

    def get_division(self) -> None:
        self.get_whitespace()
        if not self._take_exact("/") and not self._take_exact("per"):
            raise UnitsParseError("division", self._input[self.pos:])

    def get_percent(self) -> None:
        self.get_whitespace()
        if not self._take_exact("%"):
            raise UnitsParseError("percent", self._input[self.pos:])

    def at_end(self) -> bool:
        return self.pos == len(self._input)


class Unit:
    """A number, optionally with a unit given as its size in base units."""

    symbol: ClassVar[str] = ""
    __slots__ = ("value", "one")

    def __init__(self, value: float = 0.0, one: float | None = None) -> None:
        self.value = float(value)
        self.one = one

    def as_double(self) -> float:
        return self.value

    def _as(self, factor: float, wanted: float) -> float:
        if self.one is None:
            return self.value * factor
        return self.value * self.one / wanted

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        if (math.isinf(self.value) or self.value == 0
                or math.isinf(other.value) or other.value == 0):
            # Zero and infinities are unchanged by any unit.
            return self.value < other.value
        if self.one is None and other.one is None:
            return self.value < other.value
        if self.one is not None and other.one is not None:
            return self.value * self.one < other.value * other.one
        raise ComparisonError("Can't compare with units and without.")

    def __ge__(self, other: object) -> bool:
        result = self.__lt__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self >= other and other >= self

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self, factor: float) -> "Unit":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return type(self)(self.value * factor, self.one)

    def __str__(self) -> str:
        if self.one is None:
            return format(self.value, "g")
        return f"{self.value * self.one:g} {self.symbol}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, {self.one!r})"


class Length(Unit):
    """A length; the base unit is the metre."""

    symbol = "m"
    __slots__ = ()

    def as_inch(self, factor: float) -> float:
        return self._as(factor, INCH)

    @classmethod
    def get_unit(cls, lexer: Lexer) -> float:
        word = lexer.get_word()
        if word in ("mm", "millimeter", "millimeters"):
            return 1.0 / 1000.0
        if word in ("m", "meter", "meters"):
            return 1.0
        if word in ("in", "inch", "inches"):
            return INCH
        if word in ("thou", "thous", "mil", "mils"):
            return THOU
        raise UnitsParseError("length units", word)

    def __neg__(self) -> "Length":
        return Length(-self.value, self.one)


class Time(Unit):
    """A duration; the base unit is the second."""

    symbol = "s"
    __slots__ = ()

    def as_second(self, factor: float) -> float:
        return self._as(factor, 1.0)

    def as_millisecond(self, factor: float) -> float:
        return self._as(factor, 1.0 / 1000.0)

    @classmethod
    def get_unit(cls, lexer: Lexer) -> float:
        word = lexer.get_word()
        if word in ("s", "second", "seconds"):
            return 1.0
        if word in ("ms", "millisecond", "milliseconds", "millis"):
            return 1.0 / 1000.0
        if word in ("min", "mins", "minute", "minutes"):
            return MINUTE
        raise UnitsParseError("time units", word)


class Revolution(Unit):
    """A count of turns."""

    symbol = "rev"
    __slots__ = ()

    def as_revolution(self, factor: float) -> float:
        return self._as(factor, 1.0)

    @classmethod
    def get_unit(cls, lexer: Lexer) -> float:
        word = lexer.get_word()
        if word in ("rotation", "rotations", "revolutions", "revolution",
                    "rev", "revs", "cycle", "cycles"):
            return 1.0
        raise UnitsParseError("revolution units", word)


class Velocity(Unit):
    """A speed; the base unit is the metre per second."""

    symbol = "m s^-1"
    __slots__ = ()

    def as_inch_per_minute(self, factor: float) -> float:
        return self._as(factor, INCH / MINUTE)

    @classmethod
    def get_unit(cls, lexer: Lexer) -> float:
        numerator = Length.get_unit(lexer)
        lexer.get_division()
        denominator = Time.get_unit(lexer)
        return numerator / denominator


class Rpm(Unit):
    """A rotational speed in revolutions per minute."""

    symbol = "rpm"
    __slots__ = ()

    def as_rpm(self, factor: float) -> float:
        return self._as(factor, 1.0)

    @classmethod
    def get_unit(cls, lexer: Lexer) -> float:
        old_pos = lexer.pos
        if lexer.get_word() in ("rpm", "RPM"):
            return 1.0
        lexer.pos = old_pos
        revolutions = Revolution.get_unit(lexer)
        lexer.get_division()
        seconds = Time.get_unit(lexer)
        return revolutions / (seconds / MINUTE)


class Percent(Unit):
    """A percentage."""

    symbol = "%"
    __slots__ = ()

    def as_percent(self, factor: float) -> float:
        return self._as(factor, 1.0)

    def as_fraction(self, factor: float) -> float:
        return self._as(factor, 100.0)

    @classmethod
    def get_unit(cls, lexer: Lexer) -> float:
        lexer.get_percent()
        return 1.0


def parse_unit(unit_cls: type, text: str) -> Unit:
    """Parse text such as ``"25.4mm"`` or ``"4"`` into an instance of unit_cls."""
    lexer = Lexer(text)
    one = None
    try:
        value = lexer.get_double()
        lexer.get_whitespace()
        if not lexer.at_end():
            one = unit_cls.get_unit(lexer)
    except UnitsParseError as error:
        raise InvalidOptionValue(f'While parsing "{text}": {error}') from None
    lexer.get_whitespace()
    if not lexer.at_end():
        raise InvalidOptionValue(
            f'While parsing "{text}": Extra characters at end of option')
    return unit_cls(value, one)


def parse_either(first_cls: type, second_cls: type, text: str) -> Unit:
    """Parse as first_cls, falling back to second_cls."""
    try:
        return parse_unit(first_cls, text)
    except InvalidOptionValue:
        pass
    return parse_unit(second_cls, text)


def resolve_percent(value: Unit, base: Length) -> Length:
    """Turn a Percent into a fraction of base; a Length is returned unchanged."""
    if isinstance(value, Percent):
        return base * value.as_fraction(1)
    return value


@dataclass
class CommaSeparated:
    """A list of values written and read as a comma-separated string."""

    items: list = field(default_factory=list)

    @classmethod
    def parse(cls, text: str, parse_item: Callable[[str], object]) -> "CommaSeparated":
        return cls([parse_item(part) for part in text.split(",")])

    def __str__(self) -> str:
        return ", ".join(str(item) for item in self.items)

    def __iter__(self) -> Iterator:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def flatten_comma_separated(groups: Iterable[CommaSeparated]) -> list:
    """Concatenate the items of all groups into one list."""
    return list(chain.from_iterable(group.items for group in groups))


def format_comma_separated_groups(groups: Iterable[CommaSeparated]) -> str:
    return ", ".join(str(group) for group in groups)


class BoardSide(Enum):
    AUTO = "auto"
    FRONT = "front"
    BACK = "back"

    @classmethod
    def parse(cls, text: str) -> "BoardSide":
        try:
            return cls(text.lower())
        except ValueError:
            raise InvalidOptionValue(text) from None

    def __str__(self) -> str:
        return self.value


class Software(Enum):
    CUSTOM = -1
    LINUXCNC = 0
    MACH4 = 1
    MACH3 = 2

    @classmethod
    def parse(cls, text: str) -> "Software":
        try:
            return cls[text.upper()]
        except KeyError:
            raise InvalidOptionValue(text) from None

    def __str__(self) -> str:
        return self.name.lower()


class MillFeedDirection(Enum):
    ANY = "any"
    CLIMB = "climb"
    CONVENTIONAL = "conventional"

    @classmethod
    def parse(cls, text: str) -> "MillFeedDirection":
        try:
            return _FEED_DIRECTION_NAMES[text.lower()]
        except KeyError:
            raise InvalidOptionValue(text) from None


_FEED_DIRECTION_NAMES = {
    "climb": MillFeedDirection.CLIMB,
    "clockwise": MillFeedDirection.CLIMB,
    "conventional": MillFeedDirection.CONVENTIONAL,
    "anticlockwise": MillFeedDirection.CONVENTIONAL,
    "counterclockwise": MillFeedDirection.CONVENTIONAL,
    "any": MillFeedDirection.ANY,
}