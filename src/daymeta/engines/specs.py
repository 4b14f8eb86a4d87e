"""
daymeta.engines.specs
---------------------
Named MetadataSpec instances and the tables they are built from.
"""

from __future__ import annotations

from typing import Dict

from daymeta.core.types import MetadataSpec

# WMO weather interpretation codes (WW)
WMO_WEATHER_ICONS: Dict[int, str] = {
    0: "☀️",        # Clear sky
    1: "🌤️",        # Mainly clear
    2: "⛅",         # Partly cloudy
    3: "☁️",        # Overcast
    45: "🌫️",       # Fog
    48: "🌫️❄️",     # Depositing rime fog
    51: "🌦️",       # Light drizzle
    53: "🌧️",       # Moderate drizzle
    55: "💧",        # Dense drizzle
    56: "🌧️❄️",     # Light freezing drizzle
    57: "💧❄️",      # Dense freezing drizzle
    61: "🌧️",       # Slight rain
    63: "🌧️",       # Moderate rain
    65: "🌧️💧",      # Heavy rain
    66: "🌧️❄️",     # Light freezing rain
    67: "💧❄️",      # Heavy freezing rain
    71: "❄️",       # Slight snow fall
    73: "❄️❄️",     # Moderate snow fall
    75: "❄️❄️❄️",   # Heavy snow fall
    77: "❄️",       # Snow grains
    80: "🌦️",       # Slight rain showers
    81: "🌧️",       # Moderate rain showers
    82: "🌧️💧",      # Violent rain showers
    85: "❄️",       # Slight snow showers
    86: "❄️❄️",     # Heavy snow showers
    95: "⛈️",       # Thunderstorm
    96: "⛈️🧊",      # Thunderstorm with slight hail
    99: "⛈️🧊",      # Thunderstorm with heavy hail
}

DEFAULT_SPEC = MetadataSpec(weather_icons=WMO_WEATHER_ICONS)

# Weekly grids that start on Sunday
SUNDAY_FIRST_SPEC = DEFAULT_SPEC.tweak(week_start=6)

ALL_SPECS: Dict[str, MetadataSpec] = {
    "default": DEFAULT_SPEC,
    "sunday-first": SUNDAY_FIRST_SPEC,
}
