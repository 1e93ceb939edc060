# tests/test_errors.py

import pytest

from gregdate import (
    Date,
    GregdateError,
    InvalidAbsoluteError,
    InvalidDateError,
    InvalidDayError,
    InvalidDayOfWeekError,
    InvalidDayOfYearError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidPatternError,
    InvalidYearError,
    MaxDateReachedError,
    MinDateReachedError,
    NullArgumentError,
    NullDateError,
    OutOfRangeError,
)
from gregdate.core.errors import MESSAGES, render_message


@pytest.mark.parametrize("cls,code", [
    (InvalidMonthError, 101),
    (InvalidDayError, 102),
    (InvalidYearError, 103),
    (InvalidDayOfYearError, 104),
    (InvalidAbsoluteError, 105),
    (InvalidDayOfWeekError, 107),
    (InvalidDateError, 108),
    (NullArgumentError, 109),
    (MaxDateReachedError, 110),
    (MinDateReachedError, 111),
    (NullDateError, 112),
    (InvalidPatternError, 113),
    (InvalidFormatError, 114),
    (OutOfRangeError, 115),
])
def test_codes_and_catalogue(cls, code):
    assert cls.code == code
    assert code in MESSAGES
    assert issubclass(cls, GregdateError)


def test_render_message():
    assert render_message(101, "13") == "Illegal month: 13. Must be between 1 and 12."
    assert render_message(110) == "Cannot increment maximum date."
    assert render_message(999, "x") == "Error number not found: 999"
    assert render_message(108, "50%") == "Illegal date: 50%"


def test_error_carries_argument():
    with pytest.raises(InvalidDateError) as ei:
        Date(2, 30, 2001)
    assert ei.value.argument == "2-30-2001"
    assert str(ei.value) == "Illegal date: 2-30-2001"

    with pytest.raises(InvalidAbsoluteError) as ei:
        Date.from_absolute(876217)
    assert ei.value.argument == "876217"
    assert str(ei.value) == "Illegal absolute date: 876217."


def test_builtin_bases():
    assert issubclass(InvalidDateError, ValueError)
    assert issubclass(InvalidPatternError, ValueError)
    assert issubclass(NullArgumentError, TypeError)
    assert not issubclass(NullDateError, ValueError)
