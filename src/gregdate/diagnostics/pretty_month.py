from __future__ import annotations

import argparse
from typing import Dict

import gregdate
from gregdate import Date


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def holiday_marks(year: int, *, observed: bool) -> Dict[int, str]:
    """absolute day -> short holiday tag"""
    marks: Dict[int, str] = {}
    for name, d in gregdate.holidays(year, observed=observed).items():
        marks[d.to_absolute()] = name.split("-")[0][:6]
    return marks


def month_calendar(year: int, month: int, *, observed: bool = False) -> None:
    first = Date(month, 1, year)
    last = Date(month, gregdate.days_in_month(month, year), year)
    marks = holiday_marks(year, observed=observed)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.day_of_week() - 1) % 7  # Monday first
    for _ in range(pad):
        wk.append(cell("", ""))
    d = first
    while d.is_on_or_before(last):
        wk.append(cell(f"{d.day:2d}", marks.get(d.to_absolute(), "")))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        if d == last:
            break
        d = d.increment()
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    tag = "  (observed)" if observed else ""
    title = f"Gregorian month  {year}-{month:02d}  {gregdate.month_name(month)}{tag}"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a Gregorian month calendar with holidays marked.")
    p.add_argument("year", type=int, nargs="?", default=None)
    p.add_argument("month", type=int, nargs="?", default=None)
    p.add_argument("--observed", action="store_true", help="Mark observed dates instead of actual dates.")
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        today = Date.today()
        year, month = today.year, today.month
    else:
        year, month = args.year, args.month
        gregdate.check_date(month, 1, year)

    month_calendar(year, month, observed=args.observed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
