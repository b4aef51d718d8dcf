"""
Human-readable formatting for analysis results.

Used by the CLI; kept separate so other front ends can reuse the wording.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chefiq_analyzer.core.enums import (
    FAN_SPEED_NAMES,
    PRESSURE_LEVEL_NAMES,
    PRESSURE_RELEASE_NAMES,
    SHADE_LEVEL_NAMES,
    TEMPERATURE_LEVEL_NAMES,
    FanSpeed,
    PressureLevel,
    PressureRelease,
    ShadeLevel,
    TemperatureLevel,
)

if TYPE_CHECKING:
    from chefiq_analyzer.models.actions import CookingAction


def format_duration(seconds: int | float | None) -> str:
    """
    Format seconds as a short duration.

    Examples:
        90 -> "1 min 30 s"
        1800 -> "30 min"
        10800 -> "3 h"
        5400 -> "1 h 30 min"
    """
    if not seconds:
        return "-"

    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours} h")
    if minutes:
        parts.append(f"{minutes} min")
    if secs and not hours:
        parts.append(f"{secs} s")
    return " ".join(parts) or "-"


def _enum_name(table: dict, enum_type: type, value) -> str:
    try:
        return table[enum_type(value)]
    except (ValueError, KeyError):
        return str(value)


def describe_parameters(parameters: dict) -> list[str]:
    """One short label per known parameter, in a stable display order."""
    labels = []

    if "target_cavity_temp" in parameters:
        labels.append(f"{parameters['target_cavity_temp']}°F")
    if "cooking_temp" in parameters:
        labels.append(f"{parameters['cooking_temp']}°F bath")
    if "cooking_time" in parameters:
        labels.append(format_duration(parameters["cooking_time"]))
    if "fan_speed" in parameters:
        labels.append(f"Fan {_enum_name(FAN_SPEED_NAMES, FanSpeed, parameters['fan_speed'])}")
    if "temp_level" in parameters:
        labels.append(f"Heat {_enum_name(TEMPERATURE_LEVEL_NAMES, TemperatureLevel, parameters['temp_level'])}")
    if "pres_level" in parameters:
        labels.append(_enum_name(PRESSURE_LEVEL_NAMES, PressureLevel, parameters["pres_level"]))
    if "pres_release" in parameters:
        labels.append(_enum_name(PRESSURE_RELEASE_NAMES, PressureRelease, parameters["pres_release"]))
    if "shade_level" in parameters:
        labels.append(f"Shade {_enum_name(SHADE_LEVEL_NAMES, ShadeLevel, parameters['shade_level'])}")
    if parameters.get("is_frozen"):
        labels.append("Frozen")
    if parameters.get("is_bagel"):
        labels.append("Bagel")
    if "target_probe_temp" in parameters:
        labels.append(f"Probe {parameters['target_probe_temp']}°F")
    if "remove_probe_temp" in parameters:
        labels.append(f"Remove at {parameters['remove_probe_temp']}°F")

    return labels


def format_cooking_action(action: CookingAction) -> str:
    """
    One-line summary of an action.

    Example:
        "Bake (250°F, 3 h, Fan Low)"
    """
    labels = describe_parameters(action.parameters)
    if not labels:
        return action.method_name
    return f"{action.method_name} ({', '.join(labels)})"
