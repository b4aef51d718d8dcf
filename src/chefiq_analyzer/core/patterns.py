"""
Cooking method pattern catalog.

Each pattern ties a ChefIQ method to the phrases that signal it in recipe
text, the appliance that runs it, and its default program parameters.
Catalog order matters: it is the tie-break order when two methods score
the same.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

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

ParamValue = int | float | bool


@dataclass(frozen=True)
class MethodPattern:
    """Keyword signature and defaults for one appliance method."""

    method_id: str
    appliance_type: str
    keywords: tuple[str, ...]
    default_params: Mapping[str, ParamValue] = field(default_factory=dict)
    estimated_time_minutes: int | None = None

    @property
    def method_name(self) -> str:
        """Display name: first keyword, each word capitalized ("air fry" -> "Air Fry")."""
        return " ".join(word[:1].upper() + word[1:] for word in self.keywords[0].split(" "))

    @property
    def is_oven(self) -> bool:
        return self.appliance_type == "oven"

    def matches(self, text_lower: str) -> bool:
        """True when any keyword occurs as a substring of already lower-cased text."""
        return any(keyword in text_lower for keyword in self.keywords)


def _pattern(
    method_id: str,
    appliance_type: str,
    keywords: list[str],
    defaults: dict[str, ParamValue],
    estimated: int,
) -> MethodPattern:
    return MethodPattern(
        method_id=method_id,
        appliance_type=appliance_type,
        keywords=tuple(keywords),
        default_params=MappingProxyType({k: int(v) if not isinstance(v, bool) else v for k, v in defaults.items()}),
        estimated_time_minutes=estimated,
    )


# =============================================================================
# iQ Cooker Methods
# =============================================================================

PRESSURE_COOK = _pattern(
    str(CookerMethod.PRESSURE.value),
    "cooker",
    ["pressure cook", "instant pot", "pressure cooker", "quick cook", "high pressure"],
    {
        "cooking_method": CookerMethod.PRESSURE,
        "pres_level": PressureLevel.HIGH,
        "pres_release": PressureRelease.QUICK,
        "keep_warm": KeepWarm.ON,
        "delay_time": 0,
    },
    15,
)

SEAR_SAUTE = _pattern(
    str(CookerMethod.SEAR_SAUTE.value),
    "cooker",
    ["sauté", "saute", "brown", "sear", "fry", "cook until golden", "cook over medium heat", "cook over high heat"],
    {
        "cooking_method": CookerMethod.SEAR_SAUTE,
        "temp_level": TemperatureLevel.MEDIUM_LOW,
        "keep_warm": KeepWarm.OFF,
        "delay_time": 0,
    },
    10,
)

STEAM = _pattern(
    str(CookerMethod.STEAM.value),
    "cooker",
    ["steam", "steamer", "steam basket", "steamed"],
    {
        "cooking_method": CookerMethod.STEAM,
        "keep_warm": KeepWarm.OFF,
        "delay_time": 0,
    },
    15,
)

SLOW_COOK = _pattern(
    str(CookerMethod.SLOW_COOK.value),
    "cooker",
    ["slow cook", "slow cooker", "crock pot", "low and slow", "simmer"],
    {
        "cooking_method": CookerMethod.SLOW_COOK,
        "temp_level": TemperatureLevel.HIGH,
        "keep_warm": KeepWarm.ON,
        "delay_time": 0,
    },
    240,
)

SOUS_VIDE = _pattern(
    str(CookerMethod.SOUS_VIDE.value),
    "cooker",
    ["sous vide", "water bath", "vacuum seal"],
    {
        "cooking_method": CookerMethod.SOUS_VIDE,
        "delay_time": 0,
    },
    120,
)


# =============================================================================
# iQ MiniOven Methods
# =============================================================================

BAKE = _pattern(
    OvenMethod.BAKE.value,
    "oven",
    ["bake", "baking", "oven", "baked", "preheat"],
    {"cooking_time": 1800, "target_cavity_temp": 350, "fan_speed": FanSpeed.LOW},
    30,
)

AIR_FRY = _pattern(
    OvenMethod.AIR_FRY.value,
    "oven",
    ["air fry", "air fryer", "crispy", "crunchy", "air-fry"],
    {"cooking_time": 900, "target_cavity_temp": 375, "fan_speed": FanSpeed.HIGH},
    15,
)

ROAST = _pattern(
    OvenMethod.ROAST.value,
    "oven",
    ["roast", "roasted", "roasting"],
    {"cooking_time": 2700, "target_cavity_temp": 400, "fan_speed": FanSpeed.LOW},
    45,
)

BROIL = _pattern(
    OvenMethod.BROIL.value,
    "oven",
    [
        "broil", "broiled", "broiling", "grill", "grilled", "char",
        "outdoor grill", "preheated grill", "barbecue", "bbq",
    ],
    {"cooking_time": 600, "temp_level": TemperatureLevel.HIGH},
    10,
)

TOAST = _pattern(
    OvenMethod.TOAST.value,
    "oven",
    ["toast", "toasted", "toasting", "golden brown"],
    {"cooking_time": 180, "shade_level": ShadeLevel.MEDIUM},
    3,
)

DEHYDRATE = _pattern(
    OvenMethod.DEHYDRATE.value,
    "oven",
    [
        "dehydrate", "dehydrating", "dehydrator", "make jerky", "beef jerky",
        "dried fruit", "drying fruit", "fruit leather",
    ],
    {"cooking_time": 28800, "target_cavity_temp": 135},
    480,
)


COOKING_METHOD_PATTERNS: tuple[MethodPattern, ...] = (
    PRESSURE_COOK,
    SEAR_SAUTE,
    STEAM,
    SLOW_COOK,
    SOUS_VIDE,
    BAKE,
    AIR_FRY,
    ROAST,
    BROIL,
    TOAST,
    DEHYDRATE,
)


def get_pattern(method_id: str) -> MethodPattern | None:
    """Look up a catalog pattern by method id ("0".."5" or METHOD_*)."""
    for pattern in COOKING_METHOD_PATTERNS:
        if pattern.method_id == method_id:
            return pattern
    return None
