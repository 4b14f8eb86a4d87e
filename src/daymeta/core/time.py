from __future__ import annotations
from datetime import date, timedelta


def is_weekend(d: date) -> bool:
    """Saturday or Sunday in the civil calendar."""
    return d.weekday() >= 5

def week_start_of(d: date, week_start: int = 0) -> date:
    """First day of the week containing d; week_start uses 0=Mon..6=Sun."""
    if not 0 <= week_start <= 6:
        raise ValueError("week_start must be in 0..6")
    return d - timedelta(days=(d.weekday() - week_start) % 7)

def parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)
