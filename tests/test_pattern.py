# tests/test_pattern.py

import pytest

from gregdate import (
    Date,
    InvalidDateError,
    InvalidFormatError,
    InvalidPatternError,
    NullArgumentError,
)
from gregdate.format import pattern as pt


def test_parse_default_pattern():
    assert pt.parse("04-Mar-2012") == pt.ParsedFields(month=3, day=4, year=2012)
    assert Date.parse("04-Mar-2012") == Date(3, 4, 2012)
    assert Date.parse("  04-mar-2012 ") == Date(3, 4, 2012)


@pytest.mark.parametrize("text,pattern,expected", [
    ("2012-03-04", "yyyy-MM-dd", (3, 4, 2012)),
    ("3/4/2012", "M/d/yyyy", (3, 4, 2012)),
    ("12/25/1999", "MM/dd/yyyy", (12, 25, 1999)),
    ("March 4, 2012", "MMMM d, yyyy", (3, 4, 2012)),
    ("SEPTEMBER 30 3999", "MMMM dd yyyy", (9, 30, 3999)),
    ("Day 4 of March 2012", "'Day' d 'of' MMMM yyyy", (3, 4, 2012)),
    ("2012'03'04", "yyyy''MM''dd", (3, 4, 2012)),
])
def test_parse_patterns(text, pattern, expected):
    d = Date.parse(text, pattern)
    assert (d.month, d.day, d.year) == expected


def test_from_iso():
    assert Date.from_iso("2020-01-04") == Date(1, 4, 2020)
    with pytest.raises(InvalidFormatError):
        Date.from_iso("2020-1-4")


def test_parse_with_weekday():
    assert Date.parse("Sunday, March 4, 2012", "EEEE, MMMM d, yyyy") == Date(3, 4, 2012)
    assert Date.parse("sun 04-Mar-2012", "EEE dd-MMM-yyyy") == Date(3, 4, 2012)
    with pytest.raises(InvalidFormatError):
        Date.parse("Monday, March 4, 2012", "EEEE, MMMM d, yyyy")
    with pytest.raises(InvalidFormatError):
        Date.parse("Funday, March 4, 2012", "EEEE, MMMM d, yyyy")


def test_parse_rejects_bad_text():
    with pytest.raises(InvalidFormatError):
        Date.parse("xx")
    with pytest.raises(InvalidFormatError):
        Date.parse("04-Foo-2012")
    with pytest.raises(InvalidFormatError):
        Date.parse("04-March-2012")
    with pytest.raises(InvalidFormatError):
        Date.parse("04-Mar-12")
    # Non-ASCII decimal digits (Arabic-Indic, full-width) are not date digits.
    with pytest.raises(InvalidFormatError):
        Date.parse("٠٤-Mar-٢٠١٢")
    with pytest.raises(InvalidFormatError):
        Date.parse("２０１２-03-04", "yyyy-MM-dd")


def test_parse_rejects_impossible_dates():
    with pytest.raises(InvalidDateError):
        Date.parse("32-Jan-2012")
    with pytest.raises(InvalidDateError):
        Date.parse("29-Feb-1900")
    with pytest.raises(InvalidDateError):
        Date.parse("31-Dec-1600")
    with pytest.raises(InvalidDateError):
        Date.parse("2012-13-01", "yyyy-MM-dd")


@pytest.mark.parametrize("pattern", [
    "dd-MMM-yy",        # two-digit year
    "dd-MMM",           # no year
    "MMM yyyy",         # no day
    "dd yyyy",          # no month
    "'dd-MMM-yyyy",     # unterminated quote
    "",                 # empty
    "dd-MM-yyyy dd",    # repeated day
    "dd-MMM-yyyy hh",   # unknown letters
    "ddd-MMM-yyyy",     # unsupported run length
])
def test_invalid_patterns(pattern):
    with pytest.raises(InvalidPatternError):
        Date.parse("04-Mar-2012", pattern)


def test_null_arguments():
    with pytest.raises(NullArgumentError):
        Date.parse(None)
    with pytest.raises(NullArgumentError):
        Date.parse("04-Mar-2012", None)
    with pytest.raises(TypeError):
        Date.parse(None)


def test_non_string_arguments():
    with pytest.raises(TypeError):
        Date.parse(20120304)
    with pytest.raises(TypeError):
        Date.parse(b"04-Mar-2012")
    with pytest.raises(TypeError):
        Date.parse("04-Mar-2012", 42)


def test_compile_pattern_is_cached():
    assert pt.compile_pattern("dd-MMM-yyyy") is pt.compile_pattern("dd-MMM-yyyy")
    cp = pt.compile_pattern("EEE, d MMMM yyyy")
    assert cp.fields == frozenset({"weekday", "day", "month", "year"})


def test_format():
    d = Date(3, 4, 2012)
    assert d.format("EEEE, MMMM d, yyyy") == "Sunday, March 4, 2012"
    assert d.format("EEE dd-MMM-yyyy") == "Sun 04-Mar-2012"
    assert d.format("M/d/yyyy") == "3/4/2012"
    assert d.format("'Q1' yyyy") == "Q1 2012"
    assert d.format("yyyy''MM") == "2012'03"
    assert Date.from_absolute(1).format("yyyy-MM-dd") == "1601-01-01"


def test_format_then_parse_same_pattern():
    d = Date(11, 23, 2006)
    for pattern in ("dd-MMM-yyyy", "yyyy-MM-dd", "EEEE, MMMM d, yyyy", "M/d/yyyy"):
        assert Date.parse(d.format(pattern), pattern) == d
