from __future__ import annotations

from datetime import date
import calendar as pycal
import argparse

import marketday
from marketday.config import load_config


_DOW = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")


def dow_header(w: int = 6) -> str:
    return " ".join(d.ljust(w) for d in _DOW).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def month_weeks(calendar: str, gy: int, gm: int, w: int = 6) -> list[list[tuple[str, str]]]:
    """Week rows of (day-of-month, market day) cells, padded to full weeks."""
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.weekday()  # Monday=0
    for _ in range(pad):
        wk.append(cell("", "", w))
    for d, name in marketday.days_between(first, last, calendar=calendar):
        wk.append(cell(f"{d.day:2d}", name, w))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", "", w))
        weeks.append(wk)
    return weeks


def print_grid(title: str, weeks: list[list[tuple[str, str]]], w: int = 6) -> None:
    print(title)
    print(dow_header(w))
    print("-" * len(dow_header(w)))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    today = cfg.resolve_today()

    p = argparse.ArgumentParser(
        prog="marketday month-grid",
        description="Print a Gregorian month with the market day under each date.",
    )
    p.add_argument("--calendar", default=cfg.default_calendar, help="calendar id (see `marketday calendars`)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (default: current month)")
    p.add_argument("--width", type=int, default=10, help="cell width in characters (default: 10)")
    args = p.parse_args(argv)

    gy, gm = args.greg if args.greg else (today.year, today.month)
    if not (1 <= gm <= 12):
        p.error(f"month must be in 1..12, got {gm}")
    if not (1 <= gy <= 9999):
        p.error(f"year must be in 1..9999, got {gy}")
    cal = marketday.get_calendar(args.calendar)
    weeks = month_weeks(args.calendar, gy, gm, w=args.width)
    print_grid(f"{cal.display_name} market days  {gy}-{gm:02d}", weeks, w=args.width)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
