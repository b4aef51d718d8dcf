"""
Cooking time extraction.

Times are extracted in minutes. Conversion to seconds happens once,
when actions are assembled.
"""

import re

# "<n> [- n | – n | to n] <hour|hr|minute|min>[s]"
DURATION = r"(\d+)\s*(?:(?:-|–|to)\s*(\d+)\s*)?(hour|hr|minute|min)s?"

MAX_INSTRUCTION_MINUTES = 480
DEFAULT_COOK_TIME_MINUTES = 30

INSTRUCTION_TIME_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"bake.*?(?:for\s+)?{DURATION}"),
    re.compile(rf"cook.*?(?:for\s+)?{DURATION}"),
    re.compile(rf"oven.*?(?:for\s+)?{DURATION}"),
    re.compile(rf"roast.*?(?:for\s+)?{DURATION}"),
    re.compile(rf"(?:for\s+)?{DURATION}.*?(?:in\s+(?:the\s+)?oven|baking|cooking)"),
    re.compile(rf"(?:for\s+)?{DURATION}(?:\s*[,.]?\s*or\s+until)"),
    re.compile(rf"(?:for\s+an?\s+additional\s+)?{DURATION}"),
]

SIMPLE_DURATION_PATTERN = re.compile(r"(\d+)\s*(hour|hr|minute|min)s?", re.IGNORECASE)

PREP_ONLY_MARKERS = ("prepare", "mix", "combine")


def duration_pattern(prefix: str) -> re.Pattern[str]:
    """Compile `prefix` followed by a duration, matched against lower-cased text."""
    return re.compile(rf"{prefix}(?:for\s+)?{DURATION}")


def parse_duration_match(match: re.Match[str], first_group: int = 1) -> int:
    """
    Convert a DURATION match to minutes.

    Ranges ("20-25 minutes") take the upper bound.
    """
    low = int(match.group(first_group))
    high = match.group(first_group + 1)
    unit = match.group(first_group + 2).lower()

    multiplier = 60 if unit.startswith(("hour", "hr")) else 1
    minutes = low * multiplier
    if high:
        minutes = max(minutes, int(high) * multiplier)
    return minutes


def _is_prep_step(instruction_lower: str) -> bool:
    return instruction_lower.startswith("preheat") or any(
        marker in instruction_lower for marker in PREP_ONLY_MARKERS
    )


def extract_cooking_time_from_instructions(instructions: list[str]) -> int | None:
    """
    Total cooking time (minutes) stated in the instructions.

    Prep-only steps (preheat, prepare, mix, combine) are skipped. Within a
    step every pattern is tried, so overlapping phrases can count more than
    once. Steps mentioning "additional" add to the total; other steps
    compete for the main time, where the longest wins.

    Returns:
        longest main time + all additional time, or None if no time found

    Examples:
        ["Bake for 2 hours", "Bake for an additional 30 minutes"] -> 180
        ["Bake for 20-25 minutes"] -> 25
    """
    found_times: list[int] = []
    additional_time = 0
    found = False

    for instruction in instructions:
        instruction_lower = instruction.lower()
        if _is_prep_step(instruction_lower):
            continue

        is_additional = "additional" in instruction_lower
        for pattern in INSTRUCTION_TIME_PATTERNS:
            for match in pattern.finditer(instruction_lower):
                minutes = parse_duration_match(match)
                if not 0 < minutes <= MAX_INSTRUCTION_MINUTES:
                    continue
                if is_additional:
                    additional_time += minutes
                else:
                    found_times.append(minutes)
                found = True

    if not found:
        return None
    return max(found_times, default=0) + additional_time


def extract_cooking_time(text: str) -> int:
    """
    Sum every duration mentioned in free text.

    Falls back to 30 minutes when the text names no duration.
    """
    total = 0
    for match in SIMPLE_DURATION_PATTERN.finditer(text or ""):
        value = int(match.group(1))
        unit = match.group(2).lower()
        total += value * 60 if unit.startswith(("hour", "hr")) else value
    return total or DEFAULT_COOK_TIME_MINUTES
