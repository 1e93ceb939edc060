from __future__ import annotations

from typing import Dict, Union

# Message catalogue: error code -> template. "%" is replaced by the argument.
MESSAGES: Dict[int, str] = {
    101: "Illegal month: %. Must be between 1 and 12.",
    102: "Illegal day: %. Must be between 1 and the last day of the month.",
    103: "Illegal year: %. Must be between 1601 and 3999.",
    104: "Illegal day of year: %.",
    105: "Illegal absolute date: %.",
    107: "Illegal day of week: %. Must be between 0 and 6.",
    108: "Illegal date: %",
    109: "Argument must not be None: %",
    110: "Cannot increment maximum date.",
    111: "Cannot decrement minimum date.",
    112: "Cannot compute with null date.",
    113: "Invalid date parsing pattern: %",
    114: "Invalid date format: %",
    115: "Date arithmetic out of range: %",
}


def render_message(code: int, argument: str = "") -> str:
    """Substitute the first '%' of the catalogue template for ``code``."""
    template = MESSAGES.get(code)
    if template is None:
        return f"Error number not found: {code}"
    return template.replace("%", argument, 1)


class GregdateError(Exception):
    """Base error."""

    code: int = 100

    def __init__(self, argument: Union[str, int] = "") -> None:
        self.argument = str(argument)
        super().__init__(render_message(self.code, self.argument))


class InvalidMonthError(GregdateError, ValueError):
    code = 101


class InvalidDayError(GregdateError, ValueError):
    code = 102


class InvalidYearError(GregdateError, ValueError):
    code = 103


class InvalidDayOfYearError(GregdateError, ValueError):
    code = 104


class InvalidAbsoluteError(GregdateError, ValueError):
    code = 105


class InvalidDayOfWeekError(GregdateError, ValueError):
    code = 107


class InvalidDateError(GregdateError, ValueError):
    """Raised when a (month, day, year) triple fails validation as a whole."""
    code = 108


class NullArgumentError(GregdateError, TypeError):
    code = 109


class MaxDateReachedError(GregdateError):
    code = 110


class MinDateReachedError(GregdateError):
    code = 111


class NullDateError(GregdateError):
    """Raised when a field or arithmetic operation is invoked on the null date."""
    code = 112


class InvalidPatternError(GregdateError, ValueError):
    code = 113


class InvalidFormatError(GregdateError, ValueError):
    code = 114


class OutOfRangeError(GregdateError):
    """Raised when date arithmetic leaves 1601-01-01 .. 3999-12-31."""
    code = 115
