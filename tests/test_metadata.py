# tests/test_metadata.py

import asyncio
import logging
from datetime import date, timedelta
from unittest.mock import AsyncMock

import pytest

from conftest import DAY, DAY_LUNAR, TableProvider, lunar
from daymeta.core.errors import ConversionError
from daymeta.core.types import AnniversaryDate, AnniversaryRecord, HolidayInfo
from daymeta.engines.metadata import DayMetadataBuilder, tag_attributes
from daymeta.engines.specs import DEFAULT_SPEC
from daymeta.sources.anniversaries import StaticAnniversarySource
from daymeta.sources.notes import MappingNoteIndex, Note
from daymeta.sources.tags import extract_note_tags

CAKE = AnniversaryRecord("🎂", "solar", AnniversaryDate(1990, 2, 13))


def build(provider, *, daily=None, weekly=None, anniversaries=(), spec=DEFAULT_SPEC):
    notes = MappingNoteIndex(daily=dict(daily or {}), weekly=dict(weekly or {}), week_start=spec.week_start)
    return DayMetadataBuilder(provider, notes, StaticAnniversarySource(list(anniversaries)), spec)

def daily(builder, d=DAY):
    return asyncio.run(builder.daily_metadata(d)).data_attributes

def weekly(builder, d=DAY):
    return asyncio.run(builder.weekly_metadata(d)).data_attributes


def test_weekend_flag_follows_weekday():
    builder = build(TableProvider({}, default=DAY_LUNAR))
    start = date(2024, 3, 4)  # Monday
    for i in range(14):
        d = start + timedelta(days=i)
        attrs = daily(builder, d)
        assert ("data-is-weekend" in attrs) == (d.weekday() in (5, 6))
        if "data-is-weekend" in attrs:
            assert attrs["data-is-weekend"] == "true"

def test_tags_partition_into_plain_and_emoji(provider):
    builder = build(provider, daily={DAY: Note("d.md", {"tags": ["#work", "#🎉"]})})
    attrs = daily(builder)
    assert attrs["data-tags"] == "work"
    assert attrs["data-emoji-tag"] == "🎉"

def test_first_emoji_tag_and_all_plain_tags(provider):
    note = Note("d.md", {"tags": ["#🎉", "#work", "#🏃", "#home"]})
    attrs = daily(build(provider, daily={DAY: note}))
    assert attrs["data-emoji-tag"] == "🎉"
    assert attrs["data-tags"] == "work home"

def test_absent_facts_are_absent_keys(provider):
    attrs = daily(build(provider))
    assert attrs == {"data-lunar": "初四"}

def test_icon_precedence(provider):
    fm = {"icon": "📌", "weather": {"weather_code": 0}}
    assert daily(build(provider, daily={DAY: Note("d.md", fm)}, anniversaries=[CAKE]))["data-icon"] == "🎂"
    assert daily(build(provider, daily={DAY: Note("d.md", fm)}))["data-icon"] == "📌"
    del fm["icon"]
    assert daily(build(provider, daily={DAY: Note("d.md", fm)}))["data-icon"] == "☀️"

def test_unknown_weather_code(provider):
    attrs = daily(build(provider, daily={DAY: Note("d.md", {"weather": {"weather_code": 7}})}))
    assert attrs["data-icon"] == "❓"

def test_anniversary_marker_in_icon(provider):
    both = AnniversaryRecord("🎂", "both", AnniversaryDate(1985, 2, 24))
    assert daily(build(provider, anniversaries=[both]))["data-icon"] == "🎂🌕"

def test_invalid_anniversary_does_not_abort_day(provider, caplog):
    records = [AnniversaryRecord("💥", "invalid", AnniversaryDate(1990, 2, 13)), CAKE]
    note = Note("d.md", {"tags": ["#work"]})
    with caplog.at_level(logging.WARNING):
        attrs = daily(build(provider, daily={DAY: note}, anniversaries=records))
    assert attrs["data-icon"] == "🎂"
    assert attrs["data-tags"] == "work"
    assert "invalid" in caplog.text

def test_lunar_label(provider):
    assert daily(build(provider))["data-lunar"] == DAY_LUNAR.display

def test_holiday_day_off():
    sat = date(2024, 2, 10)
    provider = TableProvider({sat: lunar("正月初一", display="春", holiday=HolidayInfo("春节", False))})
    attrs = daily(build(provider), sat)
    assert attrs["data-is-holiday"] == "true"
    assert "data-is-work" not in attrs
    assert attrs["data-is-weekend"] == "true"
    assert attrs["data-lunar"] == "春"

def test_make_up_working_day():
    sun = date(2024, 2, 18)
    provider = TableProvider({sun: lunar("正月初九", holiday=HolidayInfo("春节", True, "2024-02-10"))})
    attrs = daily(build(provider), sun)
    assert attrs["data-is-work"] == "true"
    assert attrs["data-is-holiday"] == "true"
    assert attrs["data-is-weekend"] == "true"

def test_resolution_is_repeatable(provider):
    builder = build(
        provider,
        daily={DAY: Note("d.md", {"tags": ["#work", "#🎉"], "weather": {"weather_code": 61}})},
        anniversaries=[AnniversaryRecord("🎂", "both", AnniversaryDate(1990, 2, 13))],
    )
    assert daily(builder) == daily(builder)

def test_weekly_has_no_lunar_or_holiday_keys():
    provider = TableProvider({}, default=lunar("正月初一", display="春", holiday=HolidayInfo("春节", True)))
    sun = date(2024, 2, 18)
    note = Note("2024-W07.md", {"tags": ["#review", "#📚"], "icon": "🗓"})
    builder = build(provider, weekly={date(2024, 2, 12): note}, anniversaries=[CAKE])
    attrs = weekly(builder, sun)
    assert attrs == {"data-tags": "review", "data-emoji-tag": "📚", "data-icon": "🗓"}

def test_weekly_without_note(provider):
    assert weekly(build(provider)) == {}

def test_weekly_note_keyed_by_week_start(provider):
    spec = DEFAULT_SPEC.tweak(week_start=6)
    note = Note("w.md", {"tags": ["#plan"]})
    builder = build(provider, weekly={date(2024, 3, 10): note}, spec=spec)  # Sunday
    assert weekly(builder, date(2024, 3, 16))["data-tags"] == "plan"
    assert weekly(builder, date(2024, 3, 17)) == {}

def test_conversion_error_propagates():
    builder = build(TableProvider({}))
    with pytest.raises(ConversionError):
        daily(builder, date(2024, 3, 16))

def test_lenient_spec_keeps_other_facts(caplog):
    sat = date(2024, 3, 16)
    spec = DEFAULT_SPEC.tweak(strict_lunar=False)
    builder = build(
        TableProvider({}),
        daily={sat: Note("d.md", {"tags": ["#work"]})},
        anniversaries=[AnniversaryRecord("💐", "lunar", AnniversaryDate(1985, 2, 24))],
        spec=spec,
    )
    with caplog.at_level(logging.WARNING):
        attrs = daily(builder, sat)
    assert attrs == {"data-tags": "work", "data-is-weekend": "true"}
    assert "without lunar facts" in caplog.text

def test_lookups_are_awaited_once(provider):
    notes = AsyncMock()
    notes.resolve_daily_note.return_value = None
    source = AsyncMock()
    source.query_anniversaries.return_value = [CAKE]
    builder = DayMetadataBuilder(provider, notes, source)

    attrs = daily(builder)
    notes.resolve_daily_note.assert_awaited_once_with(DAY)
    source.query_anniversaries.assert_awaited_once_with()
    assert attrs["data-icon"] == "🎂"

def test_concurrent_days_are_independent():
    provider = TableProvider({}, default=DAY_LUNAR)
    days = [date(2024, 3, d) for d in range(1, 32)]
    notes = {d: Note(f"{d}.md", {"tags": [f"#day{d.day}"]}) for d in days}
    builder = build(provider, daily=notes, anniversaries=[CAKE])

    async def run():
        return await asyncio.gather(*(builder.daily_metadata(d) for d in days))

    together = [m.data_attributes for m in asyncio.run(run())]
    one_by_one = [daily(builder, d) for d in days]
    assert together == one_by_one
    assert together[12]["data-icon"] == "🎂"
    assert together[0]["data-tags"] == "day1"

def test_tag_attributes_without_matches():
    bundle = extract_note_tags(Note("d.md", {"tags": ["#a", "#b"], "weather": {"weather_code": 3}}))
    assert tag_attributes(bundle) == {"data-tags": "a b", "data-icon": "☁️"}

def test_decorations_are_empty(provider):
    assert asyncio.run(build(provider).daily_metadata(DAY)).dots == ()
