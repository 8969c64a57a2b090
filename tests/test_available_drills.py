import pytest

from millpath.available_drills import AvailableDrill, parse_available_drills
from millpath.units import CommaSeparated, InvalidOptionValue, Length, parse_unit


def length(text):
    return parse_unit(Length, text)


def test_parse_plain_number():
    assert parse_available_drills("4") == CommaSeparated([AvailableDrill(length("4"))])


def test_parse_millimeters_equals_inch():
    assert parse_available_drills("25.4mm") == CommaSeparated(
        [AvailableDrill(length("1inch"))])


def test_format_with_units():
    assert str(CommaSeparated([AvailableDrill(length("1inch"))])) == "0.0254 m"


def test_format_without_units():
    assert str(CommaSeparated([AvailableDrill(length("1"))])) == "1"


def test_format_mixed_list():
    drills = CommaSeparated([AvailableDrill(length("1inch")), AvailableDrill(length("9"))])
    assert str(drills) == "0.0254 m, 9"


def test_single_tolerance_is_symmetric():
    assert parse_available_drills("1mm:0.1mm") == CommaSeparated(
        [AvailableDrill(length("1mm"), length("-0.1mm"), length("0.1mm"))])


def test_tolerances_in_either_order():
    assert parse_available_drills("1mm:+0.1mm:-0.2mm") == CommaSeparated(
        [AvailableDrill(length("1mm"), length("-0.2mm"), length("+0.1mm"))])


def test_format_tolerances():
    assert str(parse_available_drills("1inch:0.1inches")) == "0.0254 m:-0.00254 m:+0.00254 m"


def test_format_two_drills():
    assert str(parse_available_drills("1inch,0.1inches")) == "0.0254 m, 0.00254 m"


@pytest.mark.parametrize(
    "text", ["", "50.8seconds", "1mm:0.1mm:0.2mm", "1:0.1:0.2:0.3"])
def test_invalid(text):
    with pytest.raises(InvalidOptionValue):
        parse_available_drills(text)


def test_difference_exact_match_is_zero():
    drill = AvailableDrill.parse("1mm:0.1mm")
    assert drill.difference(length("1mm"), 1) == 0.0


def test_difference_outside_tolerance_is_none():
    drill = AvailableDrill.parse("1mm:0.1mm")
    assert drill.difference(length("1.5mm"), 1) is None
    assert drill.difference(length("0.5mm"), 1) is None


def test_difference_is_symmetric_inside_tolerance():
    drill = AvailableDrill.parse("1mm:0.1mm")
    above = drill.difference(length("1.05mm"), 1)
    below = drill.difference(length("0.95mm"), 1)
    assert above == pytest.approx(below)
    assert above > 0


def test_difference_without_tolerance_accepts_anything():
    drill = AvailableDrill.parse("1mm")
    assert drill.difference(length("100mm"), 1) > drill.difference(length("2mm"), 1)


def test_parse_round_trip():
    drill = AvailableDrill.parse("1inch:0.1inches")
    assert AvailableDrill.parse(str(drill).replace(" m", "m")) == drill