from __future__ import annotations

import asyncio
import calendar as pycal
from datetime import date
from typing import Any, Dict, List, Optional, Union

from .core.engine import AnniversarySource, LunarFactProvider, NoteIndex, ProviderRegistry
from .core.types import DayMetadata, LunarInfo, MetadataSpec
from .engines.metadata import DayMetadataBuilder
from .engines.specs import ALL_SPECS
from .sources.notes import MappingNoteIndex

DEFAULT_PROVIDER = "lunar-python"
_registry: Optional[ProviderRegistry] = None

def set_registry(reg: ProviderRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ProviderRegistry:
    if _registry is None:
        raise RuntimeError("Provider registry not initialized")
    return _registry

def list_providers() -> List[str]:
    return _reg().list()

def provider_info(provider: str = DEFAULT_PROVIDER) -> Dict[str, Any]:
    return _reg().get(provider).info()

def get_provider(provider: str = DEFAULT_PROVIDER) -> LunarFactProvider:
    return _reg().get(provider)

def register_provider(name: str, provider: LunarFactProvider, *, overwrite: bool = False) -> None:
    _reg().register(name, provider, overwrite=overwrite)

def get_spec(spec: Union[str, MetadataSpec] = "default") -> MetadataSpec:
    if isinstance(spec, MetadataSpec):
        return spec
    if spec not in ALL_SPECS:
        raise KeyError(f"Unknown spec '{spec}'. Available: {sorted(ALL_SPECS)}")
    return ALL_SPECS[spec]

def lunar_info(d: date, *, provider: str = DEFAULT_PROVIDER) -> LunarInfo:
    return _reg().get(provider).lunar_info(d)

def make_builder(
    *,
    provider: Union[str, LunarFactProvider] = DEFAULT_PROVIDER,
    notes: Optional[NoteIndex] = None,
    anniversaries: Optional[AnniversarySource] = None,
    spec: Union[str, MetadataSpec] = "default",
) -> DayMetadataBuilder:
    """
    Resolve names to objects and inject them into a DayMetadataBuilder.
    Without a note index, every date resolves to "no note".
    """
    sp = get_spec(spec)
    prov = _reg().get(provider) if isinstance(provider, str) else provider
    if notes is None:
        notes = MappingNoteIndex(week_start=sp.week_start)
    return DayMetadataBuilder(prov, notes, anniversaries, sp)

# ============================================================
# Synchronous helpers
# ============================================================

def daily_metadata(d: date, **kwargs) -> DayMetadata:
    return asyncio.run(make_builder(**kwargs).daily_metadata(d))

def weekly_metadata(d: date, **kwargs) -> DayMetadata:
    return asyncio.run(make_builder(**kwargs).weekly_metadata(d))

def month_metadata(year: int, month: int, **kwargs) -> Dict[date, DayMetadata]:
    """Daily metadata for every day of a civil month, resolved concurrently."""
    builder = make_builder(**kwargs)
    days = [date(year, month, day) for day in range(1, pycal.monthrange(year, month)[1] + 1)]

    async def _run() -> List[DayMetadata]:
        return await asyncio.gather(*(builder.daily_metadata(d) for d in days))

    return dict(zip(days, asyncio.run(_run())))
