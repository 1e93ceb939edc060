from __future__ import annotations

import argparse
from typing import List, Tuple

import gregdate
from gregdate import Date


DEFAULT_COLUMNS: List[Tuple[str, str]] = [
    ("MLK", "mlk-birthday"),
    ("Wash", "washingtons-birthday"),
    ("Easter", "easter"),
    ("Memorial", "memorial-day"),
    ("Labor", "labor-day"),
    ("Columbus", "columbus-day"),
    ("Thanks", "thanksgiving"),
]


def mmdd(d: Date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_columns(arg: str) -> List[Tuple[str, str]]:
    """
    Parse column list from CLI.
    Example:
      --holidays "Easter=easter,Labor=labor-day"
    Bare names use the holiday name as header:
      --holidays "easter,thanksgiving"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            title, name = it.split("=", 1)
            out.append((title.strip(), name.strip()))
        else:
            out.append((it, it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a table of holiday dates for a range of years.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--holidays",
        type=str,
        default="",
        help='Comma list like "Easter=easter,Labor=labor-day" (default: movable federal holidays + Easter).',
    )
    p.add_argument("--observed", action="store_true", help="Show the observed weekday instead of the actual date.")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    columns = parse_columns(args.holidays) if args.holidays else DEFAULT_COLUMNS

    def fmt(d: Date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.to_iso()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [title for title, _ in columns]
    colw = [5] + [max(10 if args.dates == "iso" else 5, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for (_, name), w in zip(columns, colw[1:]):
            d = gregdate.holiday(name, Y, observed=args.observed)
            row.append(fmt(d).ljust(w))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
