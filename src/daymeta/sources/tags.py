"""
daymeta.sources.tags
--------------------
Derives the NoteTagBundle of a note from its frontmatter: tags (with the leading
'#' marker stripped), the explicit `icon` field and the `weather.weather_code`
observation. Nothing here writes to the note.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Mapping, Optional

from daymeta.core.engine import Note
from daymeta.core.types import NoteTagBundle

logger = logging.getLogger(__name__)

TAG_KEY_RE = re.compile(r"^tags?$", re.IGNORECASE)
TAG_SPLIT_RE = re.compile(r"[,\s]+")
TAG_MARKER = "#"

# Weather entries whose code cannot be read resolve to the unknown glyph.
UNKNOWN_WEATHER_CODE = -1


def _entry(frontmatter: Mapping[str, Any], key_re: re.Pattern) -> Any:
    for key, value in frontmatter.items():
        if isinstance(key, str) and key_re.match(key) and value is not None:
            return value
    return None

def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return next((v for v in value if v is not None), None)
    return value

def parse_frontmatter_tags(frontmatter: Mapping[str, Any]) -> Optional[List[str]]:
    """
    Tags of a frontmatter mapping, each normalised to start with '#'.

    Reads the `tags` (or `tag`, any case) entry, which may be a list or a comma
    or whitespace separated string. Returns None when there is no tag entry.
    """
    value = _entry(frontmatter, TAG_KEY_RE)
    if value is None:
        return None

    if isinstance(value, str):
        items = TAG_SPLIT_RE.split(value)
    elif isinstance(value, (list, tuple)):
        items = [str(v) for v in value if isinstance(v, (str, int, float)) and not isinstance(v, bool)]
    else:
        items = [str(value)]

    tags: List[str] = []
    for item in items:
        item = item.strip()
        if not item or item == TAG_MARKER:
            continue
        tags.append(item if item.startswith(TAG_MARKER) else TAG_MARKER + item)
    return tags

def strip_marker(tag: str) -> str:
    return tag[1:]

def weather_code(weather: Any) -> Optional[int]:
    """Integer WMO code of a frontmatter `weather` entry; None when absent."""
    weather = _first(weather)
    if weather is None:
        return None
    code = weather.get("weather_code") if isinstance(weather, Mapping) else None
    if isinstance(code, bool):
        code = None
    if isinstance(code, int):
        return code
    if isinstance(code, float) and code.is_integer():
        return int(code)
    if isinstance(code, str) and re.fullmatch(r"\s*-?\d+\s*", code):
        return int(code)
    logger.debug("Unreadable weather entry %r", weather)
    return UNKNOWN_WEATHER_CODE

def extract_note_tags(note: Optional[Note]) -> NoteTagBundle:
    if note is None:
        return NoteTagBundle()
    frontmatter = note.frontmatter
    if not frontmatter:
        return NoteTagBundle()

    tags = tuple(strip_marker(t) for t in (parse_frontmatter_tags(frontmatter) or []))
    icon = _first(frontmatter.get("icon"))
    return NoteTagBundle(
        tags=tags,
        icon=str(icon) if icon not in (None, "") else None,
        weather_code=weather_code(frontmatter.get("weather")),
    )
