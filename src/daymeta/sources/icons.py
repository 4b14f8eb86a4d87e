from __future__ import annotations

from typing import Optional, Sequence

from daymeta.core.types import AnniversaryMatch, MetadataSpec, NoteTagBundle
from daymeta.engines.specs import DEFAULT_SPEC


def weather_icon(code: int, spec: MetadataSpec = DEFAULT_SPEC) -> str:
    return spec.weather_icons.get(code, spec.unknown_weather_icon)

def resolve_icon(
    matches: Sequence[AnniversaryMatch],
    bundle: NoteTagBundle,
    spec: MetadataSpec = DEFAULT_SPEC,
) -> Optional[str]:
    """
    Single icon for a cell: first anniversary match > note icon > weather > none.
    """
    if matches:
        return matches[0].icon or None
    if bundle.icon:
        return bundle.icon
    if bundle.weather_code is not None:
        return weather_icon(bundle.weather_code, spec)
    return None
