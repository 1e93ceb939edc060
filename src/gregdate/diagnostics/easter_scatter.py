#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import gregdate
from gregdate import Date


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "gregdate[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "gregdate[diagnostics]"') from e


def days_after_equinox(d: Date) -> int:
    """Days after March 21 of the same year, with March 22 = 1."""
    return d.difference(Date(3, 21, d.year))


def rolling_median(np, y, win: int = 19):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d = gregdate.easter(int(Y))
        if metric == "doy":
            y[i] = float(d.day_of_year)
        elif metric == "since-equinox":
            y[i] = float(days_after_equinox(d))
        else:
            raise ValueError("metric must be 'doy' or 'since-equinox'")

    return years, y


def histogram(start_year: int, end_year: int) -> List[Tuple[str, int]]:
    """(MM-DD, count) for every Easter date that occurs in the range, in calendar order."""
    counts: dict[int, int] = {}
    for Y in range(start_year, end_year + 1):
        d = gregdate.easter(Y)
        key = d.month * 100 + d.day
        counts[key] = counts.get(key, 0) + 1
    return [(f"{k // 100:02d}-{k % 100:02d}", n) for k, n in sorted(counts.items())]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Easter dates across years.")
    p.add_argument("--start-year", type=int, default=1601)
    p.add_argument("--end-year", type=int, default=2400)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=19, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png and .pdf)")
    p.add_argument(
        "--metric",
        choices=("since-equinox", "doy"),
        default="since-equinox",
        help="Y-axis metric (default: days after March 21).",
    )
    p.add_argument("--text", action="store_true", help="Print a date histogram instead of plotting.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    if args.text:
        for mmdd, n in histogram(args.start_year, args.end_year):
            print(f"{mmdd}  {n:5d}  {'#' * max(1, n * 60 // (args.end_year - args.start_year + 1))}")
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
        "xtick.major.width": 0.8,
        "ytick.major.width": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)

    years, y = build_series(np, args.start_year, args.end_year, metric=args.metric)
    ax.scatter(years, y, s=8, color="tab:blue", linewidths=0.0, label="Easter Sunday")

    if args.show_trend:
        ax.plot(years, rolling_median(np, y, args.trend_win), color="tab:red", linewidth=1.2, label="rolling median")

    ax.set_xlabel("Year")
    ax.set_ylabel("Days after March 21" if args.metric == "since-equinox" else "Day of year")
    ax.set_title(f"Easter Sunday {args.start_year}-{args.end_year}")
    ax.grid(True, linewidth=0.4, alpha=0.5)
    ax.legend(loc="upper right", frameon=False)

    fig.savefig(f"{args.outbase}.png", dpi=200)
    fig.savefig(f"{args.outbase}.pdf")
    print(f"Wrote {args.outbase}.png and {args.outbase}.pdf")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
