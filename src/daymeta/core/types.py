from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Mapping, Optional, Tuple

MATCH_KINDS: Tuple[str, ...] = ("solar", "lunar", "both")

@dataclass(frozen=True)
class HolidayInfo:
    name: str
    is_work: bool
    target: Optional[str] = None  # holiday a make-up working day belongs to

@dataclass(frozen=True)
class LunarInfo:
    month_name: str
    day_name: str
    zodiac: str
    ganzhi_year: str
    festivals: Tuple[str, ...]
    solar_term: Optional[str]
    display: str
    real: str
    holiday: Optional[HolidayInfo] = None
    label: str = ""
    values: Tuple[str, ...] = ()

@dataclass(frozen=True)
class AnniversaryDate:
    """Solar reference date of an anniversary. ``month`` is zero-based."""
    year: int
    month: int
    day: int

    def solar_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

@dataclass(frozen=True)
class AnniversaryRecord:
    icon: str
    kind: Optional[str]
    date: Optional[AnniversaryDate]
    name: Optional[str] = None

@dataclass(frozen=True)
class AnniversaryMatch:
    record: AnniversaryRecord
    marker: Optional[str] = None

    @property
    def icon(self) -> str:
        return self.record.icon + (self.marker or "")

@dataclass(frozen=True)
class NoteTagBundle:
    tags: Tuple[str, ...] = ()
    icon: Optional[str] = None
    weather_code: Optional[int] = None

@dataclass(frozen=True)
class DayMetadata:
    data_attributes: Dict[str, str]
    dots: Tuple[Any, ...] = ()

@dataclass(frozen=True)
class MetadataSpec:
    """Pure data payload configuring a DayMetadataBuilder."""
    solar_marker: str = "☀️"
    lunar_marker: str = "🌕"
    unknown_weather_icon: str = "❓"
    weather_icons: Mapping[int, str] = field(default_factory=dict)
    strict_lunar: bool = True
    week_start: int = 0  # 0=Mon..6=Sun

    def tweak(self, **kwargs) -> "MetadataSpec":
        return replace(self, **kwargs)
