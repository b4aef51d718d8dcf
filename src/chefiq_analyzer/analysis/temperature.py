"""
Temperature extraction from recipe text.

All temperatures are reported in Fahrenheit. Values marked °C or
"degrees Celsius" are converted. Anything outside the oven range
(150-550°F) is treated as noise (quantities, years, internal temps).
"""

import logging
import re

from chefiq_analyzer.models.actions import TemperatureStep

logger = logging.getLogger(__name__)

MIN_OVEN_TEMP = 150
MAX_OVEN_TEMP = 550
MIN_CELSIUS_TEMP = 65
MAX_CELSIUS_TEMP = 290

CELSIUS_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"(\d{2,3})\s*°\s*C\b", re.IGNORECASE),
    re.compile(r"(\d{2,3})\s*degrees\s*C(?:elsius)?\b", re.IGNORECASE),
]

TEMPERATURE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"(\d{2,3})\s*°\s*F", re.IGNORECASE),
    re.compile(r"(\d{2,3})\s*degrees(?!\s*C(?:elsius)?\b)\s*(?:F|Fahrenheit)?", re.IGNORECASE),
    re.compile(r"preheat\s+(?:oven\s+)?(?:to\s+)?(\d{2,3})", re.IGNORECASE),
    re.compile(r"temperature\s+(?:to\s+)?(\d{2,3})", re.IGNORECASE),
    re.compile(r"heat\s+(?:to\s+)?(\d{2,3})", re.IGNORECASE),
    re.compile(r"oven\s+(?:to\s+)?(\d{2,3})", re.IGNORECASE),
    re.compile(r"bake\s+(?:at\s+)?(\d{2,3})", re.IGNORECASE),
]

PREHEAT_PATTERN = re.compile(r"preheat[^0-9]*(\d{2,3})", re.IGNORECASE)


def _in_oven_range(temp: int) -> bool:
    return MIN_OVEN_TEMP <= temp <= MAX_OVEN_TEMP


def celsius_to_fahrenheit(celsius: int) -> int:
    return round(celsius * 9 / 5 + 32)


def _celsius_numbers(text: str) -> dict[int, int | None]:
    """Position of every number marked Celsius -> its °F value (None outside 65-290°C)."""
    numbers: dict[int, int | None] = {}
    for pattern in CELSIUS_PATTERNS:
        for match in pattern.finditer(text):
            celsius = int(match.group(1))
            if MIN_CELSIUS_TEMP <= celsius <= MAX_CELSIUS_TEMP:
                numbers[match.start(1)] = celsius_to_fahrenheit(celsius)
            else:
                numbers.setdefault(match.start(1), None)
    return numbers


def find_temperatures(text: str) -> list[int]:
    """
    All in-range temperatures in `text`, in °F and document order.

    A number hit by several patterns ("bake at 350°F") appears once per hit.
    Celsius numbers appear once, converted.
    """
    celsius = _celsius_numbers(text)
    hits: list[tuple[int, int]] = [
        (position, temp) for position, temp in celsius.items() if temp is not None and _in_oven_range(temp)
    ]
    for pattern in TEMPERATURE_PATTERNS:
        for match in pattern.finditer(text):
            if match.start(1) in celsius:
                continue
            temp = int(match.group(1))
            if _in_oven_range(temp):
                hits.append((match.start(1), temp))

    # sort is stable, so equal positions keep pattern order
    hits.sort(key=lambda hit: hit[0])
    return [temp for _, temp in hits]


def extract_temperature(text: str, prefer_initial: bool = True) -> int | None:
    """
    Pick the single most relevant oven temperature from text.

    Resolution order:
    1. With `prefer_initial`, the number right after "preheat"
    2. If the text talks about increasing temperature, the highest value
    3. Otherwise the first temperature in the text

    Args:
        text: Free recipe text (one instruction or a whole recipe)
        prefer_initial: Favor the preheat temperature over later changes

    Returns:
        Temperature in °F, or None when nothing in range is found

    Examples:
        "Preheat oven to 375°F" -> 375
        "Bake at 350, then increase temperature to 425" -> 425
        "Bake at 180°C" -> 356
        "Chill to 40 degrees" -> None
    """
    if not text:
        return None

    temperatures = find_temperatures(text)
    if not temperatures:
        return None

    text_lower = text.lower()

    if prefer_initial and "preheat" in text_lower:
        preheat = PREHEAT_PATTERN.search(text)
        if preheat:
            celsius = _celsius_numbers(text)
            preheat_temp = celsius.get(preheat.start(1), int(preheat.group(1))) or 0
            if _in_oven_range(preheat_temp):
                return preheat_temp

    if "increase" in text_lower and "temperature" in text_lower:
        return max(temperatures)

    return temperatures[0]


def extract_temperatures_with_context(instructions: list[str]) -> list[TemperatureStep]:
    """One TemperatureStep per instruction that mentions an oven temperature."""
    steps = []
    for index, instruction in enumerate(instructions):
        temp = extract_temperature(instruction, prefer_initial=False)
        if temp is not None:
            steps.append(
                TemperatureStep(
                    step=index,
                    temp=temp,
                    is_increase="increase" in instruction.lower(),
                )
            )

    if steps:
        logger.debug(f"Temperature steps: {[(s.step, s.temp) for s in steps]}")
    return steps
