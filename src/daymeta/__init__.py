"""daymeta public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

__version__ = "0.1.0"

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_providers,
    provider_info,
    get_provider,
    register_provider,
    get_spec,
    lunar_info,
    make_builder,
    daily_metadata,
    weekly_metadata,
    month_metadata,
)
from .core.errors import ConversionError, DaymetaError, InvalidAnniversaryKind, UnknownProviderError
from .core.types import (
    AnniversaryDate,
    AnniversaryMatch,
    AnniversaryRecord,
    DayMetadata,
    HolidayInfo,
    LunarInfo,
    MetadataSpec,
    NoteTagBundle,
)
from .engines.metadata import DayMetadataBuilder
from .sources.anniversaries import JsonAnniversarySource, NoAnniversarySource, StaticAnniversarySource
from .sources.notes import MappingNoteIndex, Note

__all__ = [
    "list_providers",
    "provider_info",
    "get_provider",
    "register_provider",
    "get_spec",
    "lunar_info",
    "make_builder",
    "daily_metadata",
    "weekly_metadata",
    "month_metadata",
    "ConversionError",
    "DaymetaError",
    "InvalidAnniversaryKind",
    "UnknownProviderError",
    "AnniversaryDate",
    "AnniversaryMatch",
    "AnniversaryRecord",
    "DayMetadata",
    "HolidayInfo",
    "LunarInfo",
    "MetadataSpec",
    "NoteTagBundle",
    "DayMetadataBuilder",
    "JsonAnniversarySource",
    "NoAnniversarySource",
    "StaticAnniversarySource",
    "MappingNoteIndex",
    "Note",
]
