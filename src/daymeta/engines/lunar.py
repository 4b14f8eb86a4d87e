"""
daymeta.engines.lunar
---------------------
Lunar Fact Provider backed by the lunar_python library (Solar, Lunar, HolidayUtil).

Converts a civil date into a LunarInfo. The display label is chosen as:
  short festival name > solar term > lunar day name,
where the first day of a lunar month is shown as the month name.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from lunar_python import Solar
from lunar_python.util import HolidayUtil

from daymeta.core.errors import ConversionError
from daymeta.core.types import HolidayInfo, LunarInfo


FESTIVAL_SUFFIX = "节"
MONTH_SUFFIX = "月"


def display_festival(festivals: Sequence[str], max_len: int = 4) -> Optional[str]:
    """First festival in truncated form, or None when it is too long to display."""
    if not festivals:
        return None
    name = festivals[0]
    if len(name) >= max_len:
        return None
    if name.endswith(FESTIVAL_SUFFIX):
        name = name[: -len(FESTIVAL_SUFFIX)]
    return name or None

def display_day(month_name: str, day_name: str, day_no: int) -> str:
    return month_name if day_no == 1 else day_name

def compose_display(
    festivals: Sequence[str],
    solar_term: Optional[str],
    month_name: str,
    day_name: str,
    day_no: int,
    *,
    max_len: int = 4,
) -> str:
    return (
        display_festival(festivals, max_len)
        or solar_term
        or display_day(month_name, day_name, day_no)
    )


class LunarPythonProvider:
    """Lunar facts for the Chinese lunisolar calendar and the mainland holiday table."""

    def __init__(self, *, max_holiday_label: int = 4):
        self.max_holiday_label = max_holiday_label

    def info(self) -> Dict[str, Any]:
        return {
            "name": "lunar-python",
            "library": "lunar_python",
            "max_holiday_label": self.max_holiday_label,
        }

    def lunar_info(self, d: date) -> LunarInfo:
        try:
            solar = Solar.fromYmd(d.year, d.month, d.day)
            lunar = solar.getLunar()
            holiday = HolidayUtil.getHoliday(d.year, d.month, d.day)
            return self._build(solar, lunar, holiday)
        except Exception as e:
            raise ConversionError(f"Cannot convert {d.isoformat()} to the lunar calendar") from e

    def _build(self, solar, lunar, holiday) -> LunarInfo:
        month_name = lunar.getMonthInChinese() + MONTH_SUFFIX
        day_name = lunar.getDayInChinese()
        solar_term = lunar.getJieQi() or None
        festivals = tuple(lunar.getFestivals()) + tuple(solar.getFestivals())

        short_festival = display_festival(festivals, self.max_holiday_label)
        display = compose_display(
            festivals, solar_term, month_name, day_name, lunar.getDay(),
            max_len=self.max_holiday_label,
        )
        real = month_name + day_name

        all_festivals = [
            t for t in (
                solar_term,
                *lunar.getFestivals(),
                *lunar.getOtherFestivals(),
                *solar.getFestivals(),
                *solar.getOtherFestivals(),
            ) if t
        ]
        label = f"{lunar.getYearInGanZhi()}{lunar.getYearShengXiao()}年{month_name}{day_name}"
        if all_festivals:
            label += "。" + "，".join(all_festivals)
        label += f"。星期{solar.getWeekInChinese()}。{lunar.getYueXiang()}月。"

        return LunarInfo(
            month_name=month_name,
            day_name=day_name,
            zodiac=lunar.getYearShengXiao(),
            ganzhi_year=lunar.getYearInGanZhi(),
            festivals=festivals,
            solar_term=solar_term,
            display=display,
            real=real,
            holiday=_holiday_info(holiday),
            label=label,
            values=tuple(v for v in (short_festival, solar_term, real) if v),
        )


def _holiday_info(holiday) -> Optional[HolidayInfo]:
    if holiday is None:
        return None
    return HolidayInfo(
        name=holiday.getName(),
        is_work=bool(holiday.isWork()),
        target=holiday.getTarget() or None,
    )
