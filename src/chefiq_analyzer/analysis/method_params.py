"""
Per-method parameter extractors.

Once a method has won, its extractor reads the instructions again for the
settings that method needs (temperature, time, level, release, shade...).
Times are returned in minutes; None means "not stated".

Every numeric search works the same way: instructions in order, patterns
in order, matches in order; the first value inside the method's plausible
range wins.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from chefiq_analyzer.analysis.timing import DURATION, duration_pattern, parse_duration_match
from chefiq_analyzer.core.enums import (
    FanSpeed,
    PressureLevel,
    PressureRelease,
    ShadeLevel,
    TemperatureLevel,
)

# "<nnn> °f" or "<nnn> degrees [f]" but not "degrees c", applied to lower-cased text
FAHRENHEIT = r"(\d{2,3})\s*(?:°\s*f|degrees(?!\s*c(?:elsius)?\b)\s*f?)"


# =============================================================================
# Result Types
# =============================================================================


@dataclass(frozen=True)
class PressureParams:
    pressure_level: PressureLevel
    pressure_release: PressureRelease
    cooking_time: int | None = None


@dataclass(frozen=True)
class SlowCookParams:
    temp_level: TemperatureLevel
    cooking_time: int | None = None


@dataclass(frozen=True)
class AirFryParams:
    temperature: int | None
    cooking_time: int | None
    fan_speed: FanSpeed = FanSpeed.HIGH


@dataclass(frozen=True)
class RoastParams:
    temperature: int | None
    cooking_time: int | None
    fan_speed: FanSpeed = FanSpeed.MEDIUM


@dataclass(frozen=True)
class BroilParams:
    temp_level: TemperatureLevel
    cooking_time: int | None = None


@dataclass(frozen=True)
class SteamParams:
    cooking_time: int | None = None


@dataclass(frozen=True)
class SearSauteParams:
    temp_level: TemperatureLevel
    cooking_time: int | None = None


@dataclass(frozen=True)
class SousVideParams:
    temperature: int | None
    cooking_time: int | None


@dataclass(frozen=True)
class ToastParams:
    shade_level: ShadeLevel
    cooking_time: int | None = None
    is_frozen: bool = False
    is_bagel: bool = False


@dataclass(frozen=True)
class DehydrateParams:
    temperature: int | None
    cooking_time: int | None
    fan_speed: FanSpeed = FanSpeed.LOW


# =============================================================================
# Shared Scanning
# =============================================================================


def _first_in_range(
    instructions: list[str],
    patterns: list[re.Pattern[str]],
    low: int,
    high: int,
    to_value: Callable[[re.Match[str]], int],
) -> int | None:
    for instruction in instructions:
        instruction_lower = instruction.lower()
        for pattern in patterns:
            for match in pattern.finditer(instruction_lower):
                value = to_value(match)
                if low <= value <= high:
                    return value
    return None


def _first_time(instructions: list[str], patterns: list[re.Pattern[str]], low: int, high: int) -> int | None:
    return _first_in_range(instructions, patterns, low, high, parse_duration_match)


def _first_temp(instructions: list[str], patterns: list[re.Pattern[str]], low: int, high: int) -> int | None:
    return _first_in_range(instructions, patterns, low, high, lambda m: int(m.group(1)))


def _joined_lower(instructions: list[str]) -> str:
    return " ".join(instructions).lower()


def _has_any(text: str, phrases: Iterable[str]) -> bool:
    return any(phrase in text for phrase in phrases)


def _times(*prefixes: str) -> list[re.Pattern[str]]:
    return [duration_pattern(prefix) for prefix in prefixes]


def _temps(*prefixes: str) -> list[re.Pattern[str]]:
    return [re.compile(rf"{prefix}{FAHRENHEIT}") for prefix in prefixes]


# =============================================================================
# iQ Cooker Methods
# =============================================================================

PRESSURE_TIME_PATTERNS = _times(
    r"pressure\s+cook.*?",
    r"cook\s+(?:under\s+)?pressure.*?",
    r"(?:in\s+)?(?:the\s+)?(?:instant\s+pot|pressure\s+cooker).*?",
)


def extract_pressure_cooking_params(instructions: list[str]) -> PressureParams:
    """
    Pressure level, release method, and time under pressure (1-240 min).

    Examples:
        ["Pressure cook on low pressure for 8 minutes, then natural release"]
            -> PressureParams(LOW, NATURAL, 8)
    """
    text = _joined_lower(instructions)

    level = PressureLevel.HIGH
    if _has_any(text, ("low pressure", "gentle pressure")):
        level = PressureLevel.LOW

    release = PressureRelease.QUICK
    if _has_any(text, ("natural release", "naturally release", "let pressure release naturally")):
        release = PressureRelease.NATURAL
    elif _has_any(text, ("pulse release", "intermittent release")):
        release = PressureRelease.PULSE

    return PressureParams(
        pressure_level=level,
        pressure_release=release,
        cooking_time=_first_time(instructions, PRESSURE_TIME_PATTERNS, 1, 240),
    )


SLOW_COOK_TIME_PATTERNS = _times(
    r"slow\s+cook.*?",
    r"cook\s+(?:on\s+)?(?:low|high).*?",
    r"(?:in\s+)?(?:the\s+)?(?:slow\s+cooker|crock\s+pot).*?",
    r"simmer.*?",
)


def extract_slow_cooking_params(instructions: list[str]) -> SlowCookParams:
    """Heat level (Low unless stated otherwise, default High) and time (30 min - 24 h)."""
    text = _joined_lower(instructions)

    level = TemperatureLevel.HIGH
    if _has_any(text, ("low heat", "on low", "low temperature", "low setting")):
        level = TemperatureLevel.LOW

    return SlowCookParams(
        temp_level=level,
        cooking_time=_first_time(instructions, SLOW_COOK_TIME_PATTERNS, 30, 1440),
    )


STEAM_TIME_PATTERNS = _times(
    r"steam.*?",
    r"steaming.*?",
    r"(?:in\s+)?(?:the\s+)?steamer.*?",
    r"steam\s+basket.*?",
)


def extract_steaming_params(instructions: list[str]) -> SteamParams:
    return SteamParams(cooking_time=_first_time(instructions, STEAM_TIME_PATTERNS, 2, 90))


SEAR_TIME_PATTERNS = _times(
    r"sear.*?",
    r"saut[ée].*?",
    r"brown.*?",
    r"fry.*?",
)


def extract_searing_saute_params(instructions: list[str]) -> SearSauteParams:
    """
    Sear/sauté heat level and time (1-45 min).

    Gentle or low heat maps to Medium-Low, high heat or "hot" to High,
    anything else to Medium-High.
    """
    text = _joined_lower(instructions)

    level = TemperatureLevel.MEDIUM_HIGH
    if _has_any(text, ("low heat", "gentle", "low temperature")):
        level = TemperatureLevel.MEDIUM_LOW
    elif _has_any(text, ("high heat", "hot")):
        level = TemperatureLevel.HIGH

    return SearSauteParams(
        temp_level=level,
        cooking_time=_first_time(instructions, SEAR_TIME_PATTERNS, 1, 45),
    )


SOUS_VIDE_PREFIXES = (
    r"sous\s+vide.*?",
    r"water\s+bath.*?",
    r"vacuum.*?",
    r"immersion.*?",
)
SOUS_VIDE_TEMP_PATTERNS = _temps(
    r"sous\s+vide.*?(?:at\s+)?",
    r"water\s+bath.*?",
    r"vacuum.*?(?:at\s+)?",
    r"immersion.*?",
)
SOUS_VIDE_TIME_PATTERNS = _times(*SOUS_VIDE_PREFIXES)


def extract_sous_vide_params(instructions: list[str]) -> SousVideParams:
    """Water bath temperature (110-200°F) and time (30 min - 72 h)."""
    return SousVideParams(
        temperature=_first_temp(instructions, SOUS_VIDE_TEMP_PATTERNS, 110, 200),
        cooking_time=_first_time(instructions, SOUS_VIDE_TIME_PATTERNS, 30, 4320),
    )


# =============================================================================
# iQ MiniOven Methods
# =============================================================================

AIR_FRY_TEMP_PATTERNS = _temps(
    r"air\s+fry.*?(?:at\s+)?",
    r"(?:in\s+)?(?:the\s+)?air\s+fryer.*?",
    r"crispy.*?",
)
AIR_FRY_TIME_PATTERNS = _times(
    r"air\s+fry.*?",
    r"(?:in\s+)?(?:the\s+)?air\s+fryer.*?",
    r"crispy.*?",
)


def extract_air_frying_params(instructions: list[str]) -> AirFryParams:
    """Air fryer temperature (300-450°F) and time (3-120 min); fan always High."""
    return AirFryParams(
        temperature=_first_temp(instructions, AIR_FRY_TEMP_PATTERNS, 300, 450),
        cooking_time=_first_time(instructions, AIR_FRY_TIME_PATTERNS, 3, 120),
    )


ROAST_TEMP_PATTERNS = _temps(
    r"roast.*?(?:at\s+)?",
    r"roasting.*?",
    r"oven.*?roast.*?",
)
ROAST_TIME_PATTERNS = _times(
    r"roast.*?",
    r"roasting.*?",
    r"(?:in\s+)?(?:the\s+)?oven.*?roast.*?",
)


def extract_roasting_params(instructions: list[str]) -> RoastParams:
    """Roasting temperature (325-500°F) and time (15-240 min); fan Medium."""
    return RoastParams(
        temperature=_first_temp(instructions, ROAST_TEMP_PATTERNS, 325, 500),
        cooking_time=_first_time(instructions, ROAST_TIME_PATTERNS, 15, 240),
    )


BROIL_TIME_PATTERNS = _times(
    r"broil.*?",
    r"broiling.*?",
    r"(?:under\s+)?(?:the\s+)?broiler.*?",
)


def extract_broiling_params(instructions: list[str]) -> BroilParams:
    text = _joined_lower(instructions)

    level = TemperatureLevel.HIGH
    if _has_any(text, ("low broil", "broil on low", "low heat broil")):
        level = TemperatureLevel.LOW

    return BroilParams(
        temp_level=level,
        cooking_time=_first_time(instructions, BROIL_TIME_PATTERNS, 1, 30),
    )


TOAST_TIME_PATTERNS = _times(
    r"toast.*?",
    r"toasting.*?",
    r"golden\s+brown.*?",
)

# checked in order, first hit wins
TOAST_SHADES: list[tuple[tuple[str, ...], ShadeLevel]] = [
    (("light", "lightly toasted", "pale golden"), ShadeLevel.LIGHT),
    (("medium light", "golden"), ShadeLevel.MEDIUM_LIGHT),
    (("medium dark", "deep golden"), ShadeLevel.MEDIUM_DARK),
    (("dark", "well toasted", "deep brown"), ShadeLevel.DARK),
]


def extract_toasting_params(instructions: list[str]) -> ToastParams:
    """
    Toast shade, time (1-15 min), and the frozen / bagel toggles.

    Shade phrases are checked lightest first, so "golden brown" reads as
    Medium-Light.
    """
    text = _joined_lower(instructions)

    shade = ShadeLevel.MEDIUM
    for phrases, level in TOAST_SHADES:
        if _has_any(text, phrases):
            shade = level
            break

    return ToastParams(
        shade_level=shade,
        cooking_time=_first_time(instructions, TOAST_TIME_PATTERNS, 1, 15),
        is_frozen="frozen" in text,
        is_bagel=_has_any(text, ("bagel", "english muffin", "cut side")),
    )


DEHYDRATE_TEMP_PATTERNS = [
    *_temps(
        r"dehydrat.*?(?:at\s+)?",
        r"dehydrator.*?(?:at\s+)?",
        r"(?:make|making)\s+jerky.*?(?:at\s+)?",
    ),
    re.compile(r"(?:at\s+)?(\d{2,3})\s*degrees.*?(?:for\s+)?jerky"),
    *_temps(r"drying\s+fruit.*?(?:at\s+)?"),
]

DEHYDRATE_TIME_PATTERNS = _times(
    r"dehydrat.*?",
    r"dehydrator.*?",
    r"(?:make|making)\s+jerky.*?",
    r"drying\s+fruit.*?",
) + [
    re.compile(rf"until\s+completely\s+dried.*?{DURATION}"),
    re.compile(rf"\bdry\b.*?(?:for\s+)?{DURATION}"),
]


def extract_dehydrating_params(instructions: list[str]) -> DehydrateParams:
    """
    Dehydrating temperature (95-165°F) and time (2-72 h); fan Low.

    Examples:
        ["Dehydrate at 135°F", "Dry for 12 hours"] -> DehydrateParams(135, 720)
    """
    return DehydrateParams(
        temperature=_first_temp(instructions, DEHYDRATE_TEMP_PATTERNS, 95, 165),
        cooking_time=_first_time(instructions, DEHYDRATE_TIME_PATTERNS, 120, 4320),
    )
