"""Static ChefIQ knowledge: enums, appliance catalog, method patterns."""

from chefiq_analyzer.core.catalog import (
    CHEFIQ_APPLIANCES,
    Appliance,
    ApplianceCatalog,
    get_default_catalog,
)
from chefiq_analyzer.core.enums import (
    CookerMethod,
    FanSpeed,
    KeepWarm,
    OvenMethod,
    PressureLevel,
    PressureRelease,
    ShadeLevel,
    TemperatureLevel,
)
from chefiq_analyzer.core.patterns import COOKING_METHOD_PATTERNS, MethodPattern

__all__ = [
    "Appliance",
    "ApplianceCatalog",
    "CHEFIQ_APPLIANCES",
    "COOKING_METHOD_PATTERNS",
    "CookerMethod",
    "FanSpeed",
    "KeepWarm",
    "MethodPattern",
    "OvenMethod",
    "PressureLevel",
    "PressureRelease",
    "ShadeLevel",
    "TemperatureLevel",
    "get_default_catalog",
]
