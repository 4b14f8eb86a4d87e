"""
daymeta.engines.metadata
------------------------
The Day Metadata Builder. Binds a Lunar Fact Provider, a note index and an
anniversary source together and resolves the data attributes of a daily or
weekly calendar cell.

The only suspension points are the note lookup and the anniversary query;
everything else is a synchronous computation over the resolved inputs.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional, Sequence

from daymeta.core.engine import AnniversarySource, LunarFactProvider, NoteIndex
from daymeta.core.errors import ConversionError
from daymeta.core.time import is_weekend
from daymeta.core.types import AnniversaryMatch, DayMetadata, LunarInfo, MetadataSpec, NoteTagBundle
from daymeta.engines.specs import DEFAULT_SPEC
from daymeta.sources.anniversaries import NoAnniversarySource, match_anniversaries
from daymeta.sources.emoji import partition_emoji
from daymeta.sources.icons import resolve_icon
from daymeta.sources.tags import extract_note_tags

logger = logging.getLogger(__name__)

DATA_LUNAR = "data-lunar"
DATA_ICON = "data-icon"
DATA_TAGS = "data-tags"
DATA_EMOJI_TAG = "data-emoji-tag"
DATA_IS_WEEKEND = "data-is-weekend"
DATA_IS_HOLIDAY = "data-is-holiday"
DATA_IS_WORK = "data-is-work"

TRUE = "true"


def tag_attributes(
    bundle: NoteTagBundle,
    matches: Sequence[AnniversaryMatch] = (),
    spec: MetadataSpec = DEFAULT_SPEC,
) -> Dict[str, str]:
    """Tag, emoji-tag and icon attributes shared by daily and weekly cells."""
    attrs: Dict[str, str] = {}
    emoji, plain = partition_emoji(bundle.tags)
    if plain:
        attrs[DATA_TAGS] = " ".join(plain)
    if emoji:
        attrs[DATA_EMOJI_TAG] = emoji[0]

    icon = resolve_icon(matches, bundle, spec)
    if icon:
        attrs[DATA_ICON] = icon
    return attrs


class DayMetadataBuilder:
    def __init__(
        self,
        provider: LunarFactProvider,
        notes: NoteIndex,
        anniversaries: Optional[AnniversarySource] = None,
        spec: MetadataSpec = DEFAULT_SPEC,
    ):
        self.provider = provider
        self.notes = notes
        self.anniversaries = anniversaries if anniversaries is not None else NoAnniversarySource()
        self.spec = spec

    def _lunar_info(self, d: date) -> Optional[LunarInfo]:
        try:
            return self.provider.lunar_info(d)
        except ConversionError as e:
            if self.spec.strict_lunar:
                raise
            logger.warning("Rendering %s without lunar facts: %s", d.isoformat(), e)
            return None

    async def daily_metadata(self, d: date) -> DayMetadata:
        note = await self.notes.resolve_daily_note(d)
        lunar = self._lunar_info(d)
        bundle = extract_note_tags(note)
        records = await self.anniversaries.query_anniversaries()
        matches = match_anniversaries(d, lunar, records, self.provider, spec=self.spec)

        attrs = tag_attributes(bundle, matches, self.spec)
        if is_weekend(d):
            attrs[DATA_IS_WEEKEND] = TRUE
        if lunar is not None:
            if lunar.holiday is not None:
                if lunar.holiday.is_work:
                    attrs[DATA_IS_WORK] = TRUE
                attrs[DATA_IS_HOLIDAY] = TRUE
            if lunar.display:
                attrs[DATA_LUNAR] = lunar.display
        return DayMetadata(attrs)

    async def weekly_metadata(self, d: date) -> DayMetadata:
        # A week has no single lunar date: no lunar, holiday or anniversary facts.
        note = await self.notes.resolve_weekly_note(d)
        return DayMetadata(tag_attributes(extract_note_tags(note), (), self.spec))
