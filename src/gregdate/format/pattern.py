"""Date-pattern mini-language for parsing and formatting.

Patterns use the familiar month/day/year letter tokens:

    yyyy  - 4-digit year (e.g., 2012)
    MMMM  - full English month name (January)
    MMM   - 3-letter month abbreviation (Mar), case-insensitive on parse
    MM    - 2-digit month (03)
    M     - 1-2 digit month (3)
    dd    - 2-digit day (04)
    d     - 1-2 digit day (4)
    EEEE  - full weekday name (Sunday)
    EEE   - 3-letter weekday abbreviation (Sun)
    'x'   - quoted literal text; '' is a literal quote

Any character that is not an ASCII letter is a literal. Two-digit years
(yy) are rejected: over a 2400-year range they are ambiguous.

Examples:
    >>> parse("04-Mar-2012", "dd-MMM-yyyy")
    ParsedFields(month=3, day=4, year=2012, weekday=None)

    >>> format_fields("yyyy-MM-dd", 3, 4, 2012, 0)
    '2012-03-04'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Pattern, Tuple

from ..core.errors import InvalidFormatError, InvalidPatternError, NullArgumentError
from ..core.types import DAY_ABBREVS, MONTH_ABBREVS, MONTH_NAMES

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "dd-MMM-yyyy"
ISO_PATTERN = "yyyy-MM-dd"

DAY_NAMES: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

# token -> (field category, regex fragment)
_TOKENS: Dict[str, Tuple[str, str]] = {
    "yyyy": ("year", r"(?P<year>[0-9]{4})"),
    "MMMM": ("month", r"(?P<month_name>[A-Za-z]+)"),
    "MMM": ("month", r"(?P<month_abbr>[A-Za-z]{3})"),
    "MM": ("month", r"(?P<month>[0-9]{2})"),
    "M": ("month", r"(?P<month>[0-9]{1,2})"),
    "dd": ("day", r"(?P<day>[0-9]{2})"),
    "d": ("day", r"(?P<day>[0-9]{1,2})"),
    "EEEE": ("weekday", r"(?P<weekday_name>[A-Za-z]+)"),
    "EEE": ("weekday", r"(?P<weekday_abbr>[A-Za-z]{3})"),
}

_LOOKUP_MONTH = {name.lower(): i + 1 for i, name in enumerate(MONTH_NAMES)}
_LOOKUP_MONTH_ABBR = {name.lower(): i + 1 for i, name in enumerate(MONTH_ABBREVS)}
_LOOKUP_DAY = {name.lower(): i for i, name in enumerate(DAY_NAMES)}
_LOOKUP_DAY_ABBR = {name.lower(): i for i, name in enumerate(DAY_ABBREVS)}


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    tokens: Tuple[Tuple[str, str], ...]  # ("field", token) | ("literal", text)
    regex: Pattern[str]
    fields: frozenset


@dataclass(frozen=True)
class ParsedFields:
    month: int
    day: int
    year: int
    weekday: Optional[int] = None


def _tokenize(pattern: str) -> List[Tuple[str, str]]:
    tokens: List[Tuple[str, str]] = []
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(("literal", "'"))
                i += 2
                continue
            end = pattern.find("'", i + 1)
            if end < 0:
                raise InvalidPatternError(f"{pattern} (unterminated quote)")
            tokens.append(("literal", pattern[i + 1:end]))
            i = end + 1
        elif ("a" <= ch <= "z") or ("A" <= ch <= "Z"):
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            run = pattern[i:j]
            if run not in _TOKENS:
                raise InvalidPatternError(f"{pattern} (unsupported token {run!r})")
            tokens.append(("field", run))
            i = j
        else:
            tokens.append(("literal", ch))
            i += 1
    return tokens


@lru_cache(maxsize=64)
def compile_pattern(pattern: str) -> CompiledPattern:
    if pattern is None:
        raise NullArgumentError("pattern")
    if not isinstance(pattern, str):
        raise TypeError(f"Pattern must be a str, got {type(pattern).__name__}")
    if not pattern:
        raise InvalidPatternError("(empty pattern)")

    tokens = _tokenize(pattern)
    seen: List[str] = []
    parts: List[str] = []
    for kind, value in tokens:
        if kind == "literal":
            parts.append(re.escape(value))
            continue
        category, fragment = _TOKENS[value]
        if category in seen:
            raise InvalidPatternError(f"{pattern} (repeated {category} field)")
        seen.append(category)
        parts.append(fragment)

    logger.debug("compiled date pattern %r", pattern)
    return CompiledPattern(
        source=pattern,
        tokens=tuple(tokens),
        regex=re.compile("".join(parts), re.IGNORECASE | re.ASCII),
        fields=frozenset(seen),
    )


def parse(text: str, pattern: str = DEFAULT_PATTERN) -> ParsedFields:
    """Split ``text`` into date fields according to ``pattern``.

    Field ranges are not checked here; building a Date from the result does that.

    Raises:
        NullArgumentError: if ``text`` or ``pattern`` is None.
        TypeError: if ``text`` or ``pattern`` is not a str.
        InvalidPatternError: if the pattern is malformed or lacks a year, month or day.
        InvalidFormatError: if the text does not match the pattern.
    """
    if pattern is None:
        raise NullArgumentError("pattern")
    if text is None:
        raise NullArgumentError("value")
    if not isinstance(text, str):
        raise TypeError(f"Date text must be a str, got {type(text).__name__}")

    cp = compile_pattern(pattern)
    missing = {"year", "month", "day"} - cp.fields
    if missing:
        raise InvalidPatternError(f"{pattern} (missing {', '.join(sorted(missing))})")

    m = cp.regex.fullmatch(text.strip())
    if m is None:
        raise InvalidFormatError(f"{text} (does not match {pattern})")
    groups = {k: v for k, v in m.groupdict().items() if v is not None}

    if "month_name" in groups:
        month = _LOOKUP_MONTH.get(groups["month_name"].lower())
    elif "month_abbr" in groups:
        month = _LOOKUP_MONTH_ABBR.get(groups["month_abbr"].lower())
    else:
        month = int(groups["month"])
    if month is None:
        raise InvalidFormatError(f"{text} (unknown month name)")

    weekday: Optional[int] = None
    if "weekday_name" in groups:
        weekday = _LOOKUP_DAY.get(groups["weekday_name"].lower())
    elif "weekday_abbr" in groups:
        weekday = _LOOKUP_DAY_ABBR.get(groups["weekday_abbr"].lower())
    if "weekday" in cp.fields and weekday is None:
        raise InvalidFormatError(f"{text} (unknown weekday name)")

    return ParsedFields(month=month, day=int(groups["day"]), year=int(groups["year"]), weekday=weekday)


def format_fields(pattern: str, month: int, day: int, year: int, weekday: int) -> str:
    cp = compile_pattern(pattern)
    out: List[str] = []
    for kind, value in cp.tokens:
        if kind == "literal":
            out.append(value)
        elif value == "yyyy":
            out.append(f"{year:04d}")
        elif value == "MMMM":
            out.append(MONTH_NAMES[month - 1])
        elif value == "MMM":
            out.append(MONTH_ABBREVS[month - 1])
        elif value == "MM":
            out.append(f"{month:02d}")
        elif value == "M":
            out.append(str(month))
        elif value == "dd":
            out.append(f"{day:02d}")
        elif value == "d":
            out.append(str(day))
        elif value == "EEEE":
            out.append(DAY_NAMES[weekday])
        else:
            out.append(DAY_ABBREVS[weekday])
    return "".join(out)
