from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from marketday.config import MarketDayConfig, load_config
from marketday.core.errors import MarketDayError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


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


def _setup_logging(cfg: MarketDayConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else cfg.log_level_value
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def cmd_calendars(argv: list[str]) -> int:
    import marketday

    p = argparse.ArgumentParser(prog="marketday calendars", description="List the supported market-day calendars")
    p.parse_args(argv)

    for c in marketday.list_calendars():
        anchor = marketday.get_anchor(c.id)
        print(f"{c.id:<8} {c.display_name:<8} n={c.cycle_length}  {', '.join(c.day_names)}")
        print(f"{'':<8} anchor: {anchor.date.isoformat()} = {c.day_names[anchor.day_index]}")
    return 0


def cmd_today(argv: list[str]) -> int:
    import marketday

    cfg = load_config()
    p = argparse.ArgumentParser(prog="marketday today", description="Market day of today")
    p.add_argument("--calendar", default=cfg.default_calendar)
    args = p.parse_args(argv)

    today = cfg.resolve_today()
    idx = marketday.today_index(args.calendar, today=today)
    print(f"{today.isoformat()} {marketday.resolve_day_name(args.calendar, idx)}")
    return 0


def cmd_find(argv: list[str]) -> int:
    import marketday

    cfg = load_config()
    p = argparse.ArgumentParser(
        prog="marketday find",
        description="Market day of a target date, given the market day of a reference date",
    )
    p.add_argument("--calendar", default=cfg.default_calendar)
    p.add_argument("--ref-date", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--ref-day", default=None,
                   help="day name or index on the reference date (default: derived from the calendar anchor)")
    p.add_argument("--target", required=True, help="YYYY-MM-DD")
    args = p.parse_args(argv)

    ref_date = marketday.parse_date(args.ref_date) if args.ref_date else cfg.resolve_today()
    if args.ref_day is None:
        ref_index = marketday.today_index(args.calendar, today=ref_date)
    else:
        ref_index = marketday.day_index_of(args.calendar, args.ref_day)

    print(marketday.find_day(args.calendar, ref_date, ref_index, args.target))
    return 0


def cmd_day(argv: list[str]) -> int:
    import marketday

    cfg = load_config()
    p = argparse.ArgumentParser(prog="marketday day", description="Gregorian date -> market day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default=cfg.default_calendar)
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = marketday.day_info(args.date, calendar=args.calendar, attributes=tuple(args.attr))
    print(f"{info.civil_date.isoformat()} {info.day_name} (index {info.day_index})")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    return 0


def cmd_span(argv: list[str]) -> int:
    import marketday

    cfg = load_config()
    p = argparse.ArgumentParser(prog="marketday span", description="List market days for a range of dates")
    p.add_argument("--from", dest="start", required=True, help="YYYY-MM-DD (inclusive)")
    p.add_argument("--to", dest="end", required=True, help="YYYY-MM-DD (inclusive)")
    p.add_argument("--calendar", default=cfg.default_calendar)
    args = p.parse_args(argv)

    for d, name in marketday.days_between(args.start, args.end, calendar=args.calendar):
        print(f"{d.isoformat()}  {d.strftime('%a')}  {name}")
    return 0


def _dispatch(cmd: str, rest: list[str]) -> int:
    if cmd == "calendars":
        return cmd_calendars(rest)

    if cmd == "today":
        return cmd_today(rest)

    if cmd == "find":
        return cmd_find(rest)

    if cmd == "day":
        return cmd_day(rest)

    if cmd == "span":
        return cmd_span(rest)

    if cmd == "month-grid":
        return _run_module_main("marketday.diagnostics.month_grid", rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `marketday YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + list(argv)

    p = argparse.ArgumentParser(prog="marketday", description="Traditional four-day market calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("calendars", help="List supported calendars and their anchors")
    sub.add_parser("today", help="Market day of today")
    sub.add_parser("find", help="Market day of a target date from a reference date and day")
    sub.add_parser("day", help="Gregorian date -> market day")
    sub.add_parser("span", help="List market days for a range of dates")
    sub.add_parser("month-grid", help="Print a Gregorian month with market days (diagnostics)")

    args, rest = p.parse_known_args(argv)

    try:
        _setup_logging(load_config(), args.verbose)
        return _dispatch(args.cmd, rest)
    except MarketDayError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
