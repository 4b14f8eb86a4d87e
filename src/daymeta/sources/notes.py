"""In-memory note handles and note index for hosts that already hold parsed frontmatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Mapping, Optional

from daymeta.core.time import week_start_of


@dataclass(frozen=True)
class Note:
    path: str
    frontmatter: Optional[Mapping[str, Any]] = None


@dataclass
class MappingNoteIndex:
    """
    Resolves daily notes by date and weekly notes by the first day of their week.
    """
    daily: Dict[date, Note] = field(default_factory=dict)
    weekly: Dict[date, Note] = field(default_factory=dict)
    week_start: int = 0

    async def resolve_daily_note(self, d: date) -> Optional[Note]:
        return self.daily.get(d)

    async def resolve_weekly_note(self, d: date) -> Optional[Note]:
        return self.weekly.get(week_start_of(d, self.week_start))

    def add_daily(self, d: date, note: Note) -> None:
        self.daily[d] = note

    def add_weekly(self, d: date, note: Note) -> None:
        self.weekly[week_start_of(d, self.week_start)] = note
