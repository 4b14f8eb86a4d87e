"""
daymeta.sources.anniversaries
-----------------------------
Matches anniversary records against a civil date and its lunar facts, and
provides the anniversary sources a host can inject into the builder.

Match kinds:
  solar  - reference month/day equals the date's month/day
  lunar  - lunar month+day of the reference date equals the date's
  both   - either calendar; a marker records which one matched when only one did
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from daymeta.core.engine import LunarFactProvider
from daymeta.core.errors import ConversionError, InvalidAnniversaryKind
from daymeta.core.types import (
    MATCH_KINDS,
    AnniversaryDate,
    AnniversaryMatch,
    AnniversaryRecord,
    LunarInfo,
    MetadataSpec,
)
from daymeta.engines.specs import DEFAULT_SPEC

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# Matching
# ---------------------------------------------------------

def solar_matches(d: date, ref: AnniversaryDate) -> bool:
    return ref.month + 1 == d.month and ref.day == d.day

def lunar_matches(lunar: Optional[LunarInfo], ref: AnniversaryDate, provider: LunarFactProvider) -> bool:
    # A reference date outside the convertible range is a lunar non-match.
    if lunar is None:
        return False
    try:
        ref_info = provider.lunar_info(ref.solar_date())
    except (ConversionError, ValueError) as e:
        logger.debug("Reference date %s has no lunar date: %s", ref, e)
        return False
    return ref_info.real == lunar.real

def match_record(
    d: date,
    lunar: Optional[LunarInfo],
    record: AnniversaryRecord,
    provider: LunarFactProvider,
    *,
    spec: MetadataSpec = DEFAULT_SPEC,
) -> Optional[AnniversaryMatch]:
    """
    Match a single record. Incomplete records (no kind or no date) never match.
    Raises InvalidAnniversaryKind for a kind outside solar/lunar/both.
    """
    if record.kind is None or record.date is None:
        return None
    ref = record.date

    if record.kind == "solar":
        return AnniversaryMatch(record) if solar_matches(d, ref) else None

    if record.kind == "lunar":
        return AnniversaryMatch(record) if lunar_matches(lunar, ref, provider) else None

    if record.kind == "both":
        by_solar = solar_matches(d, ref)
        by_lunar = lunar_matches(lunar, ref, provider)
        if by_solar and by_lunar:
            return AnniversaryMatch(record)
        if by_solar:
            return AnniversaryMatch(record, marker=spec.solar_marker)
        if by_lunar:
            return AnniversaryMatch(record, marker=spec.lunar_marker)
        return None

    raise InvalidAnniversaryKind(f"Unknown anniversary kind '{record.kind}'. Expected one of {list(MATCH_KINDS)}")

def match_anniversaries(
    d: date,
    lunar: Optional[LunarInfo],
    records: Iterable[AnniversaryRecord],
    provider: LunarFactProvider,
    *,
    spec: MetadataSpec = DEFAULT_SPEC,
) -> List[AnniversaryMatch]:
    """All matches for d, in record order. Records with an unknown kind are dropped with a warning."""
    out: List[AnniversaryMatch] = []
    for record in records:
        try:
            m = match_record(d, lunar, record, provider, spec=spec)
        except InvalidAnniversaryKind as e:
            logger.warning("Skipping anniversary %s: %s", record.name or record.icon, e)
            continue
        if m is not None:
            out.append(m)
    return out


# ---------------------------------------------------------
# Record parsing
# ---------------------------------------------------------

def _int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return None

def anniversary_date_from(raw: Any) -> Optional[AnniversaryDate]:
    """
    Accepts {"year", "month", "day"} with a zero-based month, or an ISO
    "YYYY-MM-DD" string (one-based month, as written).
    """
    if isinstance(raw, str):
        try:
            d = date.fromisoformat(raw.strip())
        except ValueError:
            logger.debug("Unreadable anniversary date %r", raw)
            return None
        return AnniversaryDate(d.year, d.month - 1, d.day)
    if isinstance(raw, Mapping):
        y, m, dd = _int(raw.get("year")), _int(raw.get("month")), _int(raw.get("day"))
        if y is None or m is None or dd is None:
            logger.debug("Incomplete anniversary date %r", raw)
            return None
        return AnniversaryDate(y, m, dd)
    return None

def record_from_dict(raw: Mapping[str, Any]) -> AnniversaryRecord:
    kind = raw.get("kind", raw.get("type"))
    ref = raw.get("date", raw.get("anniversary_date"))
    return AnniversaryRecord(
        icon=str(raw.get("icon") or ""),
        kind=str(kind) if kind is not None else None,
        date=anniversary_date_from(ref) if ref is not None else None,
        name=raw.get("name"),
    )

def records_from_dicts(raw: Any) -> List[AnniversaryRecord]:
    if isinstance(raw, Mapping):
        raw = raw.get("anniversaries", [])
    return [record_from_dict(r) for r in raw if isinstance(r, Mapping)]


# ---------------------------------------------------------
# Sources
# ---------------------------------------------------------

class NoAnniversarySource:
    """No anniversary data source configured."""

    async def query_anniversaries(self) -> List[AnniversaryRecord]:
        return []

@dataclass
class StaticAnniversarySource:
    records: Sequence[AnniversaryRecord] = ()

    async def query_anniversaries(self) -> List[AnniversaryRecord]:
        return list(self.records)

class JsonAnniversarySource:
    """Reads a JSON list of anniversary records; the file is re-read on every query."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def query_anniversaries(self) -> List[AnniversaryRecord]:
        with self.path.open(encoding="utf-8") as f:
            return records_from_dicts(json.load(f))
