from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from gregdate.core.errors import GregdateError

logger = logging.getLogger("gregdate")

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_date(s: str, pattern: str | None = None):
    from gregdate import Date

    if pattern:
        return Date.parse(s, pattern)
    if _DATE_RE.match(s):
        return Date.from_iso(s)
    return Date.parse(s)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="gregdate day", description="Show calendar facts for a date")
    p.add_argument("date", help="YYYY-MM-DD or DD-Mon-YYYY (or per --pattern)")
    p.add_argument("--pattern", default=None, help="Parse pattern, e.g. 'MM/dd/yyyy'")
    args = p.parse_args(argv)

    d = _parse_date(args.date, args.pattern)
    print(f"date          {d}")
    print(f"iso           {d.to_iso()}")
    print(f"weekday       {d.day_of_week_name()} ({d.day_of_week()})")
    print(f"day of year   {d.day_of_year}")
    print(f"leap year     {'yes' if d.is_leap_year else 'no'}")
    print(f"absolute day  {d.to_absolute()}")
    return 0


def cmd_holidays(argv: list[str]) -> int:
    import gregdate

    p = argparse.ArgumentParser(prog="gregdate holidays", description="List holidays of a year")
    p.add_argument("year", type=int)
    p.add_argument("--observed", action="store_true", help="Show observed weekdays")
    p.add_argument("--federal", action="store_true", help="Federal holidays only (omit Easter)")
    args = p.parse_args(argv)

    for name, d in gregdate.holidays(args.year, observed=args.observed, federal_only=args.federal).items():
        title = gregdate.holiday_info(name).get("title", name)
        print(f"{d.to_iso()}  {d.day_of_week_name()}  {title}")
    return 0


def cmd_add(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="gregdate add", description="Add a number of days to a date")
    p.add_argument("date")
    p.add_argument("days", type=int)
    p.add_argument("--pattern", default=None)
    args = p.parse_args(argv)

    print(_parse_date(args.date, args.pattern).add(args.days))
    return 0


def cmd_diff(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="gregdate diff", description="Signed days from DATE2 to DATE1")
    p.add_argument("date1")
    p.add_argument("date2")
    p.add_argument("--pattern", default=None)
    args = p.parse_args(argv)

    print(_parse_date(args.date1, args.pattern).difference(_parse_date(args.date2, args.pattern)))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="gregdate", description="Gregorian date arithmetic and holiday toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd")

    # day
    p_day = sub.add_parser("day", help="Show calendar facts for a date")
    p_day.add_argument("date")
    p_day.add_argument("--pattern", default=None)

    sub.add_parser("holidays", help="List the holidays of a year")
    sub.add_parser("add", help="Add days to a date")
    sub.add_parser("diff", help="Days between two dates")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a month calendar with holidays marked")
    sub.add_parser("holiday-table", help="Print a holiday table across years")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["sweep", "easter-scatter"],
        help="Which diagnostic to run",
    )

    # Shortcut: `gregdate [-v] YYYY-MM-DD`
    argv = list(argv)
    i = 0
    while i < len(argv) and argv[i] in ("-v", "--verbose"):
        i += 1
    if i < len(argv) and _DATE_RE.match(argv[i]):
        argv.insert(i, "day")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd is None:
        p.print_help()
        return 2

    try:
        if args.cmd == "day":
            day_argv = [args.date]
            if args.pattern:
                day_argv += ["--pattern", args.pattern]
            return cmd_day(day_argv + rest)

        if args.cmd == "holidays":
            return cmd_holidays(rest)

        if args.cmd == "add":
            return cmd_add(rest)

        if args.cmd == "diff":
            return cmd_diff(rest)

        if args.cmd == "pretty-month":
            return _run_module_main("gregdate.diagnostics.pretty_month", rest)

        if args.cmd == "holiday-table":
            return _run_module_main("gregdate.diagnostics.holiday_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "sweep": "gregdate.diagnostics.sweep",
                "easter-scatter": "gregdate.diagnostics.easter_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except GregdateError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"gregdate: error: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
