# tests/conftest.py

from datetime import date
from typing import Dict, Optional

import pytest

from daymeta.core.errors import ConversionError
from daymeta.core.types import HolidayInfo, LunarInfo


def lunar(real: str, *, display: Optional[str] = None, holiday: Optional[HolidayInfo] = None) -> LunarInfo:
    """Minimal LunarInfo keyed by its month+day string, e.g. '二月初四'."""
    return LunarInfo(
        month_name=real[:-2],
        day_name=real[-2:],
        zodiac="龙",
        ganzhi_year="甲辰",
        festivals=(),
        solar_term=None,
        display=display or real[-2:],
        real=real,
        holiday=holiday,
    )


class TableProvider:
    """Lunar facts from a fixed table; dates outside the table fail to convert."""

    def __init__(self, table: Dict[date, LunarInfo], default: Optional[LunarInfo] = None):
        self.table = dict(table)
        self.default = default

    def info(self):
        return {"name": "table", "size": len(self.table)}

    def lunar_info(self, d: date) -> LunarInfo:
        if d in self.table:
            return self.table[d]
        if self.default is not None:
            return self.default
        raise ConversionError(f"{d} outside table")


# 2024-03-13 (Wednesday) is 二月初四
DAY = date(2024, 3, 13)
DAY_LUNAR = lunar("二月初四")


@pytest.fixture
def provider():
    return TableProvider({
        DAY: DAY_LUNAR,
        date(1990, 3, 13): lunar("二月十七"),
        date(1967, 3, 13): lunar("二月初四"),
        date(1985, 3, 24): lunar("二月初四"),
        date(1985, 6, 1): lunar("四月十三"),
    })
