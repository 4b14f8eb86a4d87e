from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Any, Dict, List, Optional

from daymeta.core.time import parse_ymd


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")


def _add_builder_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--provider", default="lunar-python")
    p.add_argument("--spec", default="default", help="named metadata spec")
    p.add_argument("--tag", action="append", default=[], help="note tag (repeatable)")
    p.add_argument("--icon", default=None, help="note icon")
    p.add_argument("--weather", type=int, default=None, help="WMO weather code of the note")

def _frontmatter(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    fm: Dict[str, Any] = {}
    if args.tag:
        fm["tags"] = list(args.tag)
    if args.icon:
        fm["icon"] = args.icon
    if args.weather is not None:
        fm["weather"] = {"weather_code": args.weather}
    return fm or None

def _print_attrs(attrs: Dict[str, str]) -> None:
    if not attrs:
        print("(no attributes)")
    for key, value in attrs.items():
        print(f"{key}={value}")


def cmd_day(argv: List[str]) -> int:
    import daymeta
    from daymeta.sources.anniversaries import JsonAnniversarySource

    p = argparse.ArgumentParser(prog="daymeta day", description="Data attributes of a daily cell")
    _add_builder_args(p)
    p.add_argument("--anniversaries", default=None, help="JSON file of anniversary records")
    p.add_argument("--lenient", action="store_true", help="render without lunar facts if conversion fails")
    args = p.parse_args(argv)

    d = parse_ymd(args.date)
    spec = daymeta.get_spec(args.spec)
    if args.lenient:
        spec = spec.tweak(strict_lunar=False)

    notes = daymeta.MappingNoteIndex(week_start=spec.week_start)
    fm = _frontmatter(args)
    if fm is not None:
        notes.add_daily(d, daymeta.Note("<cli>", fm))
    anniv = JsonAnniversarySource(args.anniversaries) if args.anniversaries else None

    meta = daymeta.daily_metadata(d, provider=args.provider, notes=notes, anniversaries=anniv, spec=spec)
    _print_attrs(meta.data_attributes)
    return 0

def cmd_week(argv: List[str]) -> int:
    import daymeta

    p = argparse.ArgumentParser(prog="daymeta week", description="Data attributes of a weekly cell")
    _add_builder_args(p)
    args = p.parse_args(argv)

    d = parse_ymd(args.date)
    spec = daymeta.get_spec(args.spec)
    notes = daymeta.MappingNoteIndex(week_start=spec.week_start)
    fm = _frontmatter(args)
    if fm is not None:
        notes.add_weekly(d, daymeta.Note("<cli>", fm))

    meta = daymeta.weekly_metadata(d, provider=args.provider, notes=notes, spec=spec)
    _print_attrs(meta.data_attributes)
    return 0

def cmd_lunar(argv: List[str]) -> int:
    import daymeta

    p = argparse.ArgumentParser(prog="daymeta lunar", description="Lunar facts of a civil date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--provider", default="lunar-python")
    args = p.parse_args(argv)

    info = daymeta.lunar_info(parse_ymd(args.date), provider=args.provider)
    print(f"Display    : {info.display}")
    print(f"Lunar date : {info.real}")
    print(f"Year       : {info.ganzhi_year}{info.zodiac}")
    print(f"Solar term : {info.solar_term or '-'}")
    print(f"Festivals  : {'，'.join(info.festivals) or '-'}")
    if info.holiday is not None:
        kind = "working day" if info.holiday.is_work else "day off"
        print(f"Holiday    : {info.holiday.name} ({kind})")
    else:
        print("Holiday    : -")
    print(f"Label      : {info.label}")
    return 0


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"

def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))

def cmd_month(argv: List[str]) -> int:
    import daymeta

    p = argparse.ArgumentParser(prog="daymeta month", description="Month grid with lunar labels")
    p.add_argument("month", help="YYYY-MM")
    p.add_argument("--provider", default="lunar-python")
    args = p.parse_args(argv)

    m = _MONTH_RE.match(args.month)
    if not m:
        p.error("month must be YYYY-MM")
    year, month = int(m.group(1)), int(m.group(2))

    metas = daymeta.month_metadata(year, month, provider=args.provider)
    days = sorted(metas)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "")] * days[0].weekday()
    for d in days:
        attrs = metas[d].data_attributes
        flag = ""
        if "data-is-work" in attrs:
            flag = "*"
        elif "data-is-holiday" in attrs:
            flag = "+"
        wk.append(cell(f"{d.day:2d}{flag}", attrs.get("data-lunar", "")))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk += [cell("", "")] * (7 - len(wk))
        weeks.append(wk)

    print(f"{year}-{month:02d}   (+ holiday, * make-up working day)")
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `daymeta YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="daymeta", description="Calendar day metadata resolution.")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Data attributes of a daily cell")
    sub.add_parser("week", help="Data attributes of a weekly cell")
    sub.add_parser("lunar", help="Lunar facts of a civil date")
    sub.add_parser("month", help="Month grid with lunar labels")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "day": cmd_day,
        "week": cmd_week,
        "lunar": cmd_lunar,
        "month": cmd_month,
    }
    return commands[args.cmd](rest)


if __name__ == "__main__":
    raise SystemExit(main())
