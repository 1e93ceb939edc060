from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

from gregdate.core import daycount as dc
from gregdate.core.date import Date
from gregdate.core.types import MAX_ABSOLUTE, MAXYEAR, MINYEAR

logger = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "gregdate[diagnostics]"') from e


def year_spans(first_year: int = MINYEAR, last_year: int = MAXYEAR) -> List[Tuple[int, int, int]]:
    """(year, first absolute day, last absolute day) for each year in range."""
    out = []
    for y in range(first_year, last_year + 1):
        lo = dc.days_before_year(y - 1) + 1
        out.append((y, lo, lo + dc.days_in_year(y) - 1))
    return out


def sweep_years(first_year: int, last_year: int, *, max_failures: int = 5) -> List[str]:
    """Check every day of [first_year, last_year]; shards are independent.

    For each absolute day: closed-form year == iterative year (walked
    incrementally), fields -> absolute round trip, and weekday step of +1 mod 7.
    """
    failures: List[str] = []
    prev_dow: Optional[int] = None
    for year, lo, hi in year_spans(first_year, last_year):
        for count in range(lo, hi + 1):
            if dc.year_from_absolute(count) != year:
                failures.append(f"year_from_absolute({count}) = {dc.year_from_absolute(count)}, expected {year}")
            d = Date.from_absolute(count)
            back = Date(d.month, d.day, d.year).to_absolute()
            if back != count:
                failures.append(f"round trip {count} -> {d.to_iso()} -> {back}")
            dow = d.day_of_week()
            if prev_dow is not None and dow != (prev_dow + 1) % 7:
                failures.append(f"weekday jump at {d.to_iso()}: {prev_dow} -> {dow}")
            prev_dow = dow
            if len(failures) >= max_failures:
                return failures
        logger.debug("swept year %d (%d..%d)", year, lo, hi)
    return failures


def sweep_numpy() -> int:
    """Vectorized closed-form decomposition checked against cumulative year lengths."""
    np = _need_numpy()
    counts = np.arange(1, MAX_ABSOLUTE + 1, dtype=np.int64)

    d0 = counts - 1
    n400, d1 = np.divmod(d0, dc.DAYS_400Y)
    n100, d2 = np.divmod(d1, dc.DAYS_100Y)
    n4, d3 = np.divmod(d2, dc.DAYS_4Y)
    n1 = d3 // dc.DAYS_1Y
    years = 400 * n400 + 100 * n100 + 4 * n4 + n1 + MINYEAR
    years -= ((n100 == 4) | (n1 == 4)).astype(np.int64)

    lengths = np.array([dc.days_in_year(y) for y in range(MINYEAR, MAXYEAR + 1)], dtype=np.int64)
    expected = np.repeat(np.arange(MINYEAR, MAXYEAR + 1, dtype=np.int64), lengths)
    return int(np.count_nonzero(years != expected))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Exhaustive check of absolute-day <-> calendar conversion.")
    p.add_argument("--from-year", type=int, default=MINYEAR)
    p.add_argument("--to-year", type=int, default=MAXYEAR)
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    p.add_argument("--numpy", action="store_true", help="Vectorized year check over the full range (needs numpy).")
    args = p.parse_args(argv)

    if args.numpy:
        bad = sweep_numpy()
        print(f"numpy sweep: {MAX_ABSOLUTE} days, {bad} mismatches")
        return 0 if bad == 0 else 1

    if not (MINYEAR <= args.from_year <= args.to_year <= MAXYEAR):
        raise SystemExit(f"year range must satisfy {MINYEAR} <= --from-year <= --to-year <= {MAXYEAR}")

    failures = sweep_years(args.from_year, args.to_year, max_failures=args.max_failures)
    if not failures:
        print(f"All days {args.from_year}-01-01 .. {args.to_year}-12-31 passed.")
        return 0

    for f in failures:
        print("FAIL", f)
    print(f"Sweep failures: {len(failures)}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
