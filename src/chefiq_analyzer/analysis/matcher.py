"""
Cooking method matching and scoring.

Two scopes are kept apart:
- analyze_instruction: one step at a time, used to place actions on steps
- analyze_whole_text: the whole recipe, used to pick and rank methods

Plus the recipe-level gates that run before scoring (stovetop-only,
grilling).
"""

import re
from dataclasses import dataclass, field

from chefiq_analyzer.core.enums import OvenMethod
from chefiq_analyzer.core.patterns import COOKING_METHOD_PATTERNS, MethodPattern

# =============================================================================
# Keyword Tables
# =============================================================================

STOVETOP_KEYWORDS: list[str] = [
    "in a saucepan",
    "in a pot",
    "in a skillet",
    "in a frying pan",
    "stove top",
    "stovetop",
    "on the stove",
    "on the burner",
    "over low heat",
    "bring to a boil",
    "bring to boil",
]

# Description lines about storage mention "freezer", "oven" etc. without cooking
STORAGE_MARKERS: list[str] = ["storage", "store in", "refrigerat", "freezer"]

GRILL_KEYWORDS: list[str] = ["grill", "grilled", "outdoor grill", "preheated grill", "grate", "barbecue", "bbq"]
GRILL_PROTEIN_KEYWORDS: list[str] = ["pork", "chicken", "beef", "lamb", "fish", "salmon", "turkey", "steak", "chops"]
TEMPERATURE_CHECK_KEYWORDS: list[str] = ["degrees", "thermometer", "internal temperature"]

BAKE_BOOST = 5
BAKE_BOOST_PHRASES = ("increase temperature", "increase oven temperature")
DEHYDRATE_PENALTY = 3
DEHYDRATE_MAX_TEMP = 200
GRILL_BAKE_MIN_MINUTES = 20


# =============================================================================
# Result Types
# =============================================================================


@dataclass
class InstructionAnalysis:
    """Methods whose keywords appear in one instruction."""

    index: int
    text: str
    matches: list[MethodPattern] = field(default_factory=list)

    def has_method(self, method_id: str) -> bool:
        return any(m.method_id == method_id for m in self.matches)


@dataclass
class ScoredMethod:
    pattern: MethodPattern
    score: int


@dataclass
class WholeTextAnalysis:
    """Matched methods ranked by score, best first."""

    scored: list[ScoredMethod] = field(default_factory=list)
    reasoning: list[str] = field(default_factory=list)

    @property
    def best(self) -> ScoredMethod | None:
        return self.scored[0] if self.scored else None


@dataclass
class GrillingDetection:
    """Oven substitute for a grilled protein recipe."""

    method_id: str
    step_index: int | None
    has_temperature_check: bool
    reasoning: list[str] = field(default_factory=list)


# =============================================================================
# Text Preparation
# =============================================================================


def filter_description(description: str) -> str:
    """Drop storage/refrigeration lines and join the rest with spaces."""
    kept = []
    for line in (description or "").split("\n"):
        line_lower = line.lower()
        if any(marker in line_lower for marker in STORAGE_MARKERS):
            continue
        kept.append(line)
    return " ".join(kept)


def _mentions_temperature_change(text_lower: str) -> bool:
    return ("increase" in text_lower or "raise" in text_lower) and "temperature" in text_lower


# =============================================================================
# Per-Instruction Scope
# =============================================================================


def analyze_instruction(
    instruction: str,
    index: int,
    patterns: tuple[MethodPattern, ...] = COOKING_METHOD_PATTERNS,
) -> InstructionAnalysis:
    """
    Find the methods mentioned in a single instruction.

    A step that raises the temperature is a baking step: Dehydrate is
    excluded there and Bake is added if not already matched.
    """
    text_lower = instruction.lower()
    temperature_change = _mentions_temperature_change(text_lower)

    matches = [
        p for p in patterns
        if p.matches(text_lower)
        and not (temperature_change and p.method_id == OvenMethod.DEHYDRATE.value)
    ]

    if temperature_change and not any(m.method_id == OvenMethod.BAKE.value for m in matches):
        bake = next((p for p in patterns if p.method_id == OvenMethod.BAKE.value), None)
        if bake:
            matches.append(bake)

    return InstructionAnalysis(index=index, text=text_lower, matches=matches)


def first_step_with_method(analyses: list[InstructionAnalysis], method_id: str) -> int | None:
    for analysis in analyses:
        if analysis.has_method(method_id):
            return analysis.index
    return None


# =============================================================================
# Whole-Recipe Scope
# =============================================================================


def count_keyword_hits(pattern: MethodPattern, text_lower: str) -> int:
    """Total occurrences of all the pattern's keywords (overlapping keywords each count)."""
    return sum(len(re.findall(re.escape(keyword), text_lower)) for keyword in pattern.keywords)


def analyze_whole_text(
    all_text_lower: str,
    extracted_temp: int | None,
    patterns: tuple[MethodPattern, ...] = COOKING_METHOD_PATTERNS,
) -> WholeTextAnalysis:
    """
    Rank every method mentioned anywhere in the recipe.

    Score is keyword frequency, with Bake boosted when the recipe raises the
    oven temperature and Dehydrate penalized above 200°F. Ties keep catalog
    order.
    """
    result = WholeTextAnalysis()

    for pattern in patterns:
        if not pattern.matches(all_text_lower):
            continue

        score = count_keyword_hits(pattern, all_text_lower)

        if pattern.method_id == OvenMethod.BAKE.value and any(
            phrase in all_text_lower for phrase in BAKE_BOOST_PHRASES
        ):
            score += BAKE_BOOST
            result.reasoning.append("Detected temperature increase instructions - prioritizing bake method.")

        if (
            pattern.method_id == OvenMethod.DEHYDRATE.value
            and extracted_temp
            and extracted_temp > DEHYDRATE_MAX_TEMP
        ):
            score = max(0, score - DEHYDRATE_PENALTY)

        result.scored.append(ScoredMethod(pattern=pattern, score=score))

    result.scored.sort(key=lambda s: s.score, reverse=True)
    return result


# =============================================================================
# Recipe-Level Gates
# =============================================================================


def is_stovetop_only(
    all_text_lower: str,
    patterns: tuple[MethodPattern, ...] = COOKING_METHOD_PATTERNS,
) -> bool:
    """
    Stovetop wording with no appliance method at all.

    "Over medium/high heat" is not stovetop-only: the cooker can sauté.
    """
    if not any(keyword in all_text_lower for keyword in STOVETOP_KEYWORDS):
        return False
    return not any(p.matches(all_text_lower) for p in patterns)


def detect_grilling(
    all_text_lower: str,
    instructions: list[str],
    cook_time: int,
) -> GrillingDetection | None:
    """
    Suggest an oven method for a grilled protein.

    Crispy/crunchy wording keeps Air Fry, char/sear/brown picks Broil, a
    cook time over 20 minutes picks Bake, and Air Fry is the fallback.

    Returns:
        GrillingDetection, or None when the recipe is not grilled protein
    """
    has_grilling = any(keyword in all_text_lower for keyword in GRILL_KEYWORDS)
    has_protein = any(keyword in all_text_lower for keyword in GRILL_PROTEIN_KEYWORDS)
    if not (has_grilling and has_protein):
        return None

    reasoning = ["Detected grilling recipe with protein - suggesting oven as ChefIQ alternative."]

    method = OvenMethod.AIR_FRY
    if "crispy" in all_text_lower or "crunchy" in all_text_lower:
        reasoning.append("Detected need for crispy texture - suggesting Air Fry.")
    elif any(word in all_text_lower for word in ("char", "sear", "brown")):
        method = OvenMethod.BROIL
        reasoning.append("Detected need for browning/searing - suggesting Broil.")
    elif cook_time > GRILL_BAKE_MIN_MINUTES:
        method = OvenMethod.BAKE
        reasoning.append("Longer cooking time detected - suggesting Bake.")

    step_index = next(
        (
            i for i, instruction in enumerate(instructions)
            if any(keyword in instruction.lower() for keyword in GRILL_KEYWORDS)
        ),
        None,
    )

    return GrillingDetection(
        method_id=method.value,
        step_index=step_index,
        has_temperature_check=any(k in all_text_lower for k in TEMPERATURE_CHECK_KEYWORDS),
        reasoning=reasoning,
    )
