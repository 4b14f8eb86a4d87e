from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Tuple

# Code point ranges whose glyphs mark a tag as an emoji tag.
GLYPH_RANGES: Sequence[Tuple[int, int]] = (
    (0x00A9, 0x00A9), (0x00AE, 0x00AE),
    (0x203C, 0x203C), (0x2049, 0x2049),
    (0x2122, 0x2122), (0x2139, 0x2139),
    (0x2190, 0x21FF),                    # arrows
    (0x231A, 0x231B), (0x2328, 0x2328), (0x23CF, 0x23CF),
    (0x23E9, 0x23F3), (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB), (0x25B6, 0x25B6), (0x25C0, 0x25C0), (0x25FB, 0x25FE),
    (0x2600, 0x26FF),                    # misc symbols
    (0x2700, 0x27BF),                    # dingbats
    (0x2934, 0x2935),
    (0x2B05, 0x2B07), (0x2B1B, 0x2B1C), (0x2B50, 0x2B50), (0x2B55, 0x2B55),
    (0x3030, 0x3030), (0x303D, 0x303D), (0x3297, 0x3297), (0x3299, 0x3299),
    (0x10000, 0x10FFFF),                 # pictographs, regional indicators, enclosed supplements
)

VS16 = chr(0xFE0F)
KEYCAP = chr(0x20E3)


def _char_class(ranges: Sequence[Tuple[int, int]]) -> str:
    parts = []
    for lo, hi in ranges:
        parts.append(re.escape(chr(lo)) if lo == hi else f"{re.escape(chr(lo))}-{re.escape(chr(hi))}")
    return "[" + "".join(parts) + "]"

EMOJI_RE = re.compile(f"{_char_class(GLYPH_RANGES)}|[#-9]{VS16}?{KEYCAP}")


def is_emoji(tag: str) -> bool:
    return EMOJI_RE.search(tag) is not None

def partition_emoji(tags: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Stable split of tags into (emoji tags, plain tags)."""
    emoji: List[str] = []
    plain: List[str] = []
    for tag in tags:
        (emoji if is_emoji(tag) else plain).append(tag)
    return emoji, plain
