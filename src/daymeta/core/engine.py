from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Protocol

from .errors import UnknownProviderError
from .types import AnniversaryRecord, LunarInfo

class LunarFactProvider(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def lunar_info(self, d: date) -> LunarInfo: ...

class Note(Protocol):
    @property
    def frontmatter(self) -> Optional[Mapping[str, Any]]: ...

class NoteIndex(Protocol):
    async def resolve_daily_note(self, d: date) -> Optional[Note]: ...
    async def resolve_weekly_note(self, d: date) -> Optional[Note]: ...

class AnniversarySource(Protocol):
    async def query_anniversaries(self) -> List[AnniversaryRecord]: ...

@dataclass
class ProviderRegistry:
    _providers: Dict[str, LunarFactProvider]

    def get(self, name: str) -> LunarFactProvider:
        if name not in self._providers:
            raise UnknownProviderError(f"Unknown provider '{name}'. Available: {sorted(self._providers)}")
        return self._providers[name]

    def list(self) -> List[str]:
        return sorted(self._providers.keys())

    def register(self, name: str, provider: LunarFactProvider, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._providers):
            raise KeyError(f"Provider '{name}' already exists. Use overwrite=True to replace.")
        self._providers[name] = provider
