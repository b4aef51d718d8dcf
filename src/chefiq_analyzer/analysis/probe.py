"""
Probe (meat thermometer) helpers.

Decides whether a recipe cooks to an internal temperature, which target
temperature its protein needs, and whether to pull it early for
carry-over cooking.
"""

import re

PROBE_KEYWORDS: list[str] = [
    "internal temperature",
    "probe",
    "thermometer",
    "until cooked through",
    "meat thermometer",
    "doneness",
    "internal temp",
    "reaches temperature",
    "cook until",
    "temp probe",
    "temperature probe",
]

# Checked in order; first protein found in the text wins
PROTEIN_TEMPERATURES: dict[str, int] = {
    "chicken": 165,
    "turkey": 165,
    "pork": 145,
    "beef": 135,  # medium-rare
    "lamb": 145,
    "fish": 145,
    "salmon": 145,
}
DEFAULT_PROBE_TEMP = 145

REMOVE_TEMP_KEYWORDS: list[str] = [
    "remove at",
    "pull at",
    "take out at",
    "remove from heat at",
    "pull from",
    "rest",
    "resting",
    "carryover",
    "carry over",
    "let rest",
    "allow to rest",
    "remove when",
]

# Large cuts that keep cooking after they leave the heat
CARRYOVER_PROTEINS: list[str] = [
    "steak",
    "beef",
    "roast",
    "prime rib",
    "brisket",
    "pork loin",
    "pork chop",
    "lamb",
    "turkey",
    "whole chicken",
    "chicken breast",
    "duck breast",
    "venison",
    "tenderloin",
]

REMOVE_TEMP_PATTERNS: list[re.Pattern[str]] = [
    re.compile(
        r"(?:remove|pull|take out)(?:\s+(?:at|when|from\s+(?:heat|oven)\s+at))\s+"
        r"(\d{2,3})\s*(?:°\s*f|degrees\s*f?|°)"
    ),
    re.compile(r"(\d{2,3})\s*(?:°\s*f|degrees\s*f?).*?(?:remove|pull|take out)"),
]

MIN_REMOVE_TEMP = 100
MAX_CARRYOVER_DROP = 15


def needs_probe(text_lower: str) -> bool:
    return any(keyword in text_lower for keyword in PROBE_KEYWORDS)


def find_protein(text_lower: str) -> str | None:
    """First protein from the temperature table mentioned in the text."""
    for protein in PROTEIN_TEMPERATURES:
        if protein in text_lower:
            return protein
    return None


def get_protein_temperature(text_lower: str) -> int:
    """Target internal temperature (°F) for the recipe's protein, default 145."""
    protein = find_protein(text_lower)
    return PROTEIN_TEMPERATURES[protein] if protein else DEFAULT_PROBE_TEMP


def should_use_remove_temp(text_lower: str) -> bool:
    """True when the recipe rests its meat or cooks a cut with real carry-over."""
    return any(keyword in text_lower for keyword in REMOVE_TEMP_KEYWORDS) or any(
        protein in text_lower for protein in CARRYOVER_PROTEINS
    )


def extract_remove_temperature(text_lower: str, target_temp: int) -> int | None:
    """
    Temperature to pull the food at so carry-over finishes the cook.

    An explicit "remove at 155°F" is used when it sits within 15°F below the
    target. Otherwise recipes that rest (or use large cuts) get target - 10
    for targets of 160°F and up, target - 5 below that, never under 100°F.

    Examples:
        ("pull at 130°f ... beef", 135) -> 130
        ("let rest 10 minutes", 165) -> 155
        ("serve hot", 145) -> None
    """
    for pattern in REMOVE_TEMP_PATTERNS:
        for match in pattern.finditer(text_lower):
            temp = int(match.group(1))
            if MIN_REMOVE_TEMP <= temp < target_temp and temp >= target_temp - MAX_CARRYOVER_DROP:
                return temp

    if should_use_remove_temp(text_lower):
        offset = 10 if target_temp >= 160 else 5
        return max(MIN_REMOVE_TEMP, target_temp - offset)

    return None
