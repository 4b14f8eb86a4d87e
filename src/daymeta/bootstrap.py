from __future__ import annotations
from daymeta.core.engine import ProviderRegistry
from daymeta.engines.lunar import LunarPythonProvider

def build_registry() -> ProviderRegistry:
    return ProviderRegistry({"lunar-python": LunarPythonProvider()})
