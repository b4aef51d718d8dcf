"""
ChefIQ device enums.

Integer values match the numeric codes the appliances accept.
Oven methods are string identifiers.
"""

from enum import Enum, IntEnum


class FanSpeed(IntEnum):
    OFF = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class TemperatureLevel(IntEnum):
    LOW = 0
    MEDIUM_LOW = 1
    MEDIUM_HIGH = 2
    HIGH = 3


class PressureLevel(IntEnum):
    LOW = 0
    HIGH = 1


class PressureRelease(IntEnum):
    QUICK = 0
    PULSE = 1
    NATURAL = 2


class KeepWarm(IntEnum):
    OFF = 0
    ON = 1


class ShadeLevel(IntEnum):
    LIGHT = 0
    MEDIUM_LIGHT = 1
    MEDIUM = 2
    MEDIUM_DARK = 3
    DARK = 4


class CookerMethod(IntEnum):
    """iQ Cooker program codes."""

    PRESSURE = 0
    SEAR_SAUTE = 1
    STEAM = 2
    SLOW_COOK = 3
    DEHYDRATE = 4
    SOUS_VIDE = 5


class OvenMethod(str, Enum):
    """iQ MiniOven program identifiers."""

    AIR_FRY = "METHOD_AIR_FRY"
    BAKE = "METHOD_BAKE"
    ROAST = "METHOD_ROAST"
    BROIL = "METHOD_BROIL"
    TOAST = "METHOD_TOAST"
    DEHYDRATE = "METHOD_DEHYDRATE"


# =============================================================================
# Display Names
# =============================================================================

FAN_SPEED_NAMES: dict[FanSpeed, str] = {
    FanSpeed.OFF: "Off",
    FanSpeed.LOW: "Low",
    FanSpeed.MEDIUM: "Medium",
    FanSpeed.HIGH: "High",
}

TEMPERATURE_LEVEL_NAMES: dict[TemperatureLevel, str] = {
    TemperatureLevel.LOW: "Low",
    TemperatureLevel.MEDIUM_LOW: "Medium-Low",
    TemperatureLevel.MEDIUM_HIGH: "Medium-High",
    TemperatureLevel.HIGH: "High",
}

PRESSURE_LEVEL_NAMES: dict[PressureLevel, str] = {
    PressureLevel.LOW: "Low Pressure",
    PressureLevel.HIGH: "High Pressure",
}

PRESSURE_RELEASE_NAMES: dict[PressureRelease, str] = {
    PressureRelease.QUICK: "Quick Release",
    PressureRelease.PULSE: "Pulse Release",
    PressureRelease.NATURAL: "Natural Release",
}

SHADE_LEVEL_NAMES: dict[ShadeLevel, str] = {
    ShadeLevel.LIGHT: "Light",
    ShadeLevel.MEDIUM_LIGHT: "Medium-Light",
    ShadeLevel.MEDIUM: "Medium",
    ShadeLevel.MEDIUM_DARK: "Medium-Dark",
    ShadeLevel.DARK: "Dark",
}
