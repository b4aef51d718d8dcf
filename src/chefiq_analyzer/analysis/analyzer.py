"""
Recipe analysis orchestration.

Pipeline for one recipe:
1. Build the recipe-wide text (title + description without storage notes + steps)
2. Stovetop-only gate
3. Extract initial temperature, per-step temperatures, and instruction time
4. Grilled protein -> oven substitute (returns early)
5. Score methods across the whole text, map the winner to an appliance
6. Probe decision (oven only)
7. Merge defaults, initial temperature, and method-specific parameters
8. Primary action, optional "increased temperature" bake, secondary methods

Every decision is recorded in `reasoning` so callers can explain the result.
"""

import logging
from typing import Callable

from pydantic import ValidationError

from chefiq_analyzer.analysis.matcher import (
    GrillingDetection,
    InstructionAnalysis,
    analyze_instruction,
    analyze_whole_text,
    detect_grilling,
    filter_description,
    first_step_with_method,
    is_stovetop_only,
)
from chefiq_analyzer.analysis.method_params import (
    extract_air_frying_params,
    extract_broiling_params,
    extract_dehydrating_params,
    extract_pressure_cooking_params,
    extract_roasting_params,
    extract_searing_saute_params,
    extract_slow_cooking_params,
    extract_sous_vide_params,
    extract_steaming_params,
    extract_toasting_params,
)
from chefiq_analyzer.analysis.probe import (
    extract_remove_temperature,
    find_protein,
    get_protein_temperature,
    needs_probe,
    should_use_remove_temp,
)
from chefiq_analyzer.analysis.temperature import (
    extract_temperature,
    extract_temperatures_with_context,
)
from chefiq_analyzer.analysis.timing import extract_cooking_time_from_instructions
from chefiq_analyzer.core.catalog import CHEFIQ_APPLIANCES, ApplianceCatalog, get_default_catalog
from chefiq_analyzer.core.enums import (
    PRESSURE_RELEASE_NAMES,
    SHADE_LEVEL_NAMES,
    TEMPERATURE_LEVEL_NAMES,
    CookerMethod,
    OvenMethod,
    PressureLevel,
)
from chefiq_analyzer.core.patterns import COOKING_METHOD_PATTERNS, MethodPattern, ParamValue
from chefiq_analyzer.exceptions import AnalysisError, ChefIQAnalyzerError
from chefiq_analyzer.models.actions import CookingAction, RecipeAnalysisResult

logger = logging.getLogger(__name__)

STOVETOP_ONLY_REASON = "Recipe uses stovetop cooking only - no ChefIQ appliance needed."
NO_METHOD_REASON = "No specific cooking methods detected that match ChefIQ capabilities."
NO_APPLIANCE_REASON = "Could not map detected cooking method to available appliances."
ANALYSIS_ERROR_REASON = "Error occurred during recipe analysis"

GRILLING_CONFIDENCE = 0.8
SECONDARY_DEFAULT_SECONDS = 600
MAX_SECONDARY_METHODS = 2

# Oven methods whose cavity temperature follows the recipe's preheat temperature
INITIAL_TEMP_METHODS = {OvenMethod.BAKE.value, OvenMethod.ROAST.value, OvenMethod.AIR_FRY.value}


# =============================================================================
# Method-Specific Parameters
# =============================================================================

Params = dict[str, ParamValue]


def _apply_time(params: Params, reasoning: list[str], minutes: int | None, label: str) -> None:
    if minutes:
        params["cooking_time"] = minutes * 60
        reasoning.append(f"Using extracted {label} time: {minutes} minutes")


def _apply_pressure(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_pressure_cooking_params(instructions)
    params["pres_level"] = int(extracted.pressure_level)
    level = "High" if extracted.pressure_level == PressureLevel.HIGH else "Low"
    reasoning.append(f"Detected pressure level: {level} pressure")
    params["pres_release"] = int(extracted.pressure_release)
    reasoning.append(f"Detected pressure release method: {PRESSURE_RELEASE_NAMES[extracted.pressure_release]}")
    _apply_time(params, reasoning, extracted.cooking_time, "pressure cooking")


def _apply_sear_saute(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_searing_saute_params(instructions)
    params["temp_level"] = int(extracted.temp_level)
    reasoning.append(
        f"Using searing/sautéing temperature level: {TEMPERATURE_LEVEL_NAMES[extracted.temp_level]}"
    )
    _apply_time(params, reasoning, extracted.cooking_time, "searing/sautéing")


def _apply_steam(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_steaming_params(instructions)
    _apply_time(params, reasoning, extracted.cooking_time, "steaming")


def _apply_slow_cook(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_slow_cooking_params(instructions)
    params["temp_level"] = int(extracted.temp_level)
    reasoning.append(
        f"Detected slow cooking temperature level: {TEMPERATURE_LEVEL_NAMES[extracted.temp_level]}"
    )
    _apply_time(params, reasoning, extracted.cooking_time, "slow cooking")


def _apply_sous_vide(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_sous_vide_params(instructions)
    if extracted.temperature:
        params["cooking_temp"] = extracted.temperature
        reasoning.append(f"Using extracted sous vide temperature: {extracted.temperature}°F")
    _apply_time(params, reasoning, extracted.cooking_time, "sous vide")


def _apply_air_fry(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_air_frying_params(instructions)
    if extracted.temperature:
        params["target_cavity_temp"] = extracted.temperature
        reasoning.append(f"Using extracted air fryer temperature: {extracted.temperature}°F")
    params["fan_speed"] = int(extracted.fan_speed)
    reasoning.append("Using air fryer fan speed: High")
    _apply_time(params, reasoning, extracted.cooking_time, "air frying")


def _apply_roast(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_roasting_params(instructions)
    if extracted.temperature:
        params["target_cavity_temp"] = extracted.temperature
        reasoning.append(f"Using extracted roasting temperature: {extracted.temperature}°F")
    params["fan_speed"] = int(extracted.fan_speed)
    reasoning.append("Using roasting fan speed: Medium")
    _apply_time(params, reasoning, extracted.cooking_time, "roasting")


def _apply_broil(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_broiling_params(instructions)
    params["temp_level"] = int(extracted.temp_level)
    reasoning.append(f"Using broiling temperature level: {TEMPERATURE_LEVEL_NAMES[extracted.temp_level]}")
    _apply_time(params, reasoning, extracted.cooking_time, "broiling")


def _apply_toast(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_toasting_params(instructions)
    params["shade_level"] = int(extracted.shade_level)
    reasoning.append(f"Using toasting shade level: {SHADE_LEVEL_NAMES[extracted.shade_level]}")
    if extracted.is_frozen:
        params["is_frozen"] = True
        reasoning.append("Detected frozen bread setting")
    if extracted.is_bagel:
        params["is_bagel"] = True
        reasoning.append("Detected bagel mode setting")
    _apply_time(params, reasoning, extracted.cooking_time, "toasting")


def _apply_dehydrate(instructions: list[str], params: Params, reasoning: list[str]) -> None:
    extracted = extract_dehydrating_params(instructions)
    if extracted.temperature:
        params["target_cavity_temp"] = extracted.temperature
        reasoning.append(f"Using extracted dehydrating temperature: {extracted.temperature}°F")
    params["fan_speed"] = int(extracted.fan_speed)
    reasoning.append("Using dehydrating fan speed: Low")
    _apply_time(params, reasoning, extracted.cooking_time, "dehydrating")


# Bake has no extractor: its settings come from defaults and the initial temperature
METHOD_PARAM_APPLIERS: dict[str, Callable[[list[str], Params, list[str]], None]] = {
    str(CookerMethod.PRESSURE.value): _apply_pressure,
    str(CookerMethod.SEAR_SAUTE.value): _apply_sear_saute,
    str(CookerMethod.STEAM.value): _apply_steam,
    str(CookerMethod.SLOW_COOK.value): _apply_slow_cook,
    str(CookerMethod.SOUS_VIDE.value): _apply_sous_vide,
    OvenMethod.AIR_FRY.value: _apply_air_fry,
    OvenMethod.ROAST.value: _apply_roast,
    OvenMethod.BROIL.value: _apply_broil,
    OvenMethod.TOAST.value: _apply_toast,
    OvenMethod.DEHYDRATE.value: _apply_dehydrate,
}


# =============================================================================
# Analyzer
# =============================================================================


class RecipeAnalyzer:
    """
    Maps recipe text to ChefIQ cooking actions.

    Stateless apart from its (read-only) appliance catalog and method
    patterns, so one instance can be shared across threads.
    """

    def __init__(
        self,
        catalog: ApplianceCatalog | None = None,
        patterns: tuple[MethodPattern, ...] = COOKING_METHOD_PATTERNS,
    ):
        self.catalog = catalog if catalog is not None else ApplianceCatalog(CHEFIQ_APPLIANCES)
        self.patterns = patterns

    def analyze(
        self,
        title: str,
        description: str,
        instructions: list[str],
        cook_time: int = 0,
    ) -> RecipeAnalysisResult:
        """
        Analyze one recipe.

        Args:
            title: Recipe title
            description: Free-text description; storage notes are ignored
            instructions: Ordered instruction texts (index = step index)
            cook_time: Total cook time in minutes, 0 if unknown

        Returns:
            RecipeAnalysisResult; zero confidence when nothing applies

        Raises:
            AnalysisError: unexpected failure while analyzing
        """
        try:
            return self._analyze(title or "", description or "", list(instructions or []), cook_time or 0)
        except Exception as e:
            raise AnalysisError(f"Recipe analysis failed for {title!r}: {e}") from e

    def _analyze(
        self,
        title: str,
        description: str,
        instructions: list[str],
        cook_time: int,
    ) -> RecipeAnalysisResult:
        all_text = " ".join([title, filter_description(description), *instructions])
        all_text_lower = all_text.lower()

        if is_stovetop_only(all_text_lower, self.patterns):
            return RecipeAnalysisResult.empty(STOVETOP_ONLY_REASON)

        reasoning: list[str] = []

        extracted_temp = extract_temperature(all_text, prefer_initial=True)
        temperature_steps = extract_temperatures_with_context(instructions)
        extracted_time = extract_cooking_time_from_instructions(instructions)

        if extracted_temp:
            reasoning.append(f"Detected initial temperature: {extracted_temp}°F")
        if extracted_time:
            reasoning.append(f"Detected cooking time: {extracted_time} minutes from instructions")
        if len(temperature_steps) > 1:
            reasoning.append(f"Detected {len(temperature_steps)} temperature changes in recipe")

        analyses = [analyze_instruction(text, i, self.patterns) for i, text in enumerate(instructions)]

        grilling = detect_grilling(all_text_lower, instructions, cook_time)
        if grilling:
            reasoning.extend(grilling.reasoning)
            result = self._grilling_result(grilling, all_text_lower, extracted_temp, cook_time, reasoning)
            if result:
                return result

        whole = analyze_whole_text(all_text_lower, extracted_temp, self.patterns)
        best = whole.best
        if best is None:
            return RecipeAnalysisResult.empty(NO_METHOD_REASON)
        reasoning.extend(whole.reasoning)

        pattern = best.pattern
        appliance = self.catalog.by_type(pattern.appliance_type)
        if appliance is None:
            logger.warning(f"No appliance of type {pattern.appliance_type!r} in catalog")
            return RecipeAnalysisResult.empty(NO_APPLIANCE_REASON)

        reasoning.append(f'Detected "{pattern.keywords[0]}" cooking method from recipe text.')

        # Probe (oven only)
        use_probe = False
        probe_temp: int | None = None
        remove_temp: int | None = None
        if pattern.is_oven and needs_probe(all_text_lower):
            use_probe = True
            reasoning.append("Detected temperature-based cooking instructions, suggesting probe use.")
            probe_temp = get_protein_temperature(all_text_lower)
            protein = find_protein(all_text_lower)
            if protein:
                reasoning.append(f'Found "{protein}" in recipe, suggesting {probe_temp}°F target temperature.')
            if should_use_remove_temp(all_text_lower):
                remove_temp = extract_remove_temperature(all_text_lower, probe_temp)
                if remove_temp and remove_temp != probe_temp:
                    reasoning.append(
                        f"Recipe involves large protein or resting - suggesting remove temp at {remove_temp}°F "
                        f"({probe_temp - remove_temp}°F carryover cooking)."
                    )

        # Defaults + initial temperature + method-specific extraction
        params: Params = dict(pattern.default_params)
        if pattern.is_oven and extracted_temp and pattern.method_id in INITIAL_TEMP_METHODS:
            params["target_cavity_temp"] = extracted_temp
            reasoning.append(f"Using extracted initial temperature of {extracted_temp}°F for {pattern.keywords[0]}.")

        applier = METHOD_PARAM_APPLIERS.get(pattern.method_id)
        if applier:
            applier(instructions, params, reasoning)

        total_seconds = self._resolve_cooking_time(pattern, params, extracted_time, cook_time)

        primary_params: Params = dict(params)
        if use_probe and probe_temp is not None:
            primary_params["target_probe_temp"] = probe_temp
            if remove_temp and remove_temp != probe_temp:
                primary_params["remove_probe_temp"] = remove_temp
        primary_params["cooking_time"] = total_seconds

        primary = CookingAction(
            appliance_id=appliance.category_id,
            method_id=pattern.method_id,
            method_name=pattern.method_name,
            parameters=primary_params,
            step_index=first_step_with_method(analyses, pattern.method_id),
        )
        actions = [primary]
        reasoning.append(f"Suggested {appliance.name} with {primary.method_name} method.")

        increase = self._increased_temperature_action(
            pattern, params, temperature_steps, extracted_temp, total_seconds, appliance.category_id
        )
        if increase:
            actions.append(increase)
            reasoning.append(
                f"Added second baking step at {increase.parameters['target_cavity_temp']}°F for temperature increase."
            )

        for secondary in self._secondary_actions(whole.scored, pattern, analyses, cook_time, appliance.category_id):
            actions.append(secondary)
            reasoning.append(f"Also detected {secondary.method_name} method in recipe steps.")

        return RecipeAnalysisResult(
            suggested_appliance=appliance.category_id,
            suggested_actions=actions,
            use_probe=use_probe,
            probe_temp=probe_temp if use_probe else None,
            confidence=min(1.0, best.score * 0.3 + 0.4),
            reasoning=reasoning,
        )

    # -------------------------------------------------------------------------
    # Assembly helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _resolve_cooking_time(
        pattern: MethodPattern,
        params: Params,
        extracted_time: int | None,
        cook_time: int,
    ) -> int:
        """Seconds: instruction time > passed cook time > method default > estimate."""
        if extracted_time:
            return extracted_time * 60
        if cook_time:
            return cook_time * 60
        default = params.get("cooking_time")
        if default:
            return int(default)
        return (pattern.estimated_time_minutes or 0) * 60

    def _grilling_result(
        self,
        grilling: GrillingDetection,
        all_text_lower: str,
        extracted_temp: int | None,
        cook_time: int,
        reasoning: list[str],
    ) -> RecipeAnalysisResult | None:
        oven = self.catalog.by_type("oven")
        pattern = next((p for p in self.patterns if p.method_id == grilling.method_id), None)
        if oven is None or pattern is None:
            return None

        params: Params = dict(pattern.default_params)
        if extracted_temp and grilling.method_id == OvenMethod.BAKE.value:
            params["target_cavity_temp"] = extracted_temp

        probe_temp = get_protein_temperature(all_text_lower)
        if grilling.has_temperature_check:
            params["target_probe_temp"] = probe_temp
            if should_use_remove_temp(all_text_lower):
                remove_temp = extract_remove_temperature(all_text_lower, probe_temp)
                if remove_temp and remove_temp != probe_temp:
                    params["remove_probe_temp"] = remove_temp

        params["cooking_time"] = cook_time * 60 or (pattern.estimated_time_minutes or 0) * 60

        action = CookingAction(
            appliance_id=oven.category_id,
            method_id=pattern.method_id,
            method_name=pattern.method_name,
            parameters=params,
            step_index=grilling.step_index,
        )
        return RecipeAnalysisResult(
            suggested_appliance=oven.category_id,
            suggested_actions=[action],
            use_probe=grilling.has_temperature_check,
            probe_temp=probe_temp if grilling.has_temperature_check else None,
            confidence=GRILLING_CONFIDENCE,
            reasoning=reasoning,
        )

    @staticmethod
    def _increased_temperature_action(
        pattern: MethodPattern,
        params: Params,
        temperature_steps: list,
        extracted_temp: int | None,
        total_seconds: int,
        appliance_id: str,
    ) -> CookingAction | None:
        """Second bake at the raised temperature, given a third of the total time."""
        if pattern.method_id != OvenMethod.BAKE.value or len(temperature_steps) <= 1:
            return None

        increase = next((step for step in temperature_steps if step.is_increase), None)
        if increase is None or increase.temp <= (extracted_temp or 0):
            return None

        return CookingAction(
            appliance_id=appliance_id,
            method_id=pattern.method_id,
            method_name=f"{pattern.method_name} (Increased Temp)",
            parameters={
                **params,
                "target_cavity_temp": increase.temp,
                "cooking_time": total_seconds // 3,
            },
            step_index=increase.step,
        )

    @staticmethod
    def _secondary_actions(
        scored: list,
        best: MethodPattern,
        analyses: list[InstructionAnalysis],
        cook_time: int,
        appliance_id: str,
    ) -> list[CookingAction]:
        """
        Runner-up methods on the same appliance (e.g. sauté before pressure cook).

        Each gets its default time capped at a third of the passed cook time.
        """
        actions = []
        for candidate in scored[1 : 1 + MAX_SECONDARY_METHODS]:
            other = candidate.pattern
            if candidate.score <= 1 or other.appliance_type != best.appliance_type or other.method_id == best.method_id:
                continue

            params: Params = dict(other.default_params)
            params["cooking_time"] = min(
                int(params.get("cooking_time") or SECONDARY_DEFAULT_SECONDS),
                cook_time * 60 // 3,
            )
            actions.append(
                CookingAction(
                    appliance_id=appliance_id,
                    method_id=other.method_id,
                    method_name=other.method_name,
                    parameters=params,
                    step_index=first_step_with_method(analyses, other.method_id),
                )
            )
        return actions


# =============================================================================
# Public Entry Point
# =============================================================================


def analyze_recipe_for_chefiq(
    title: str,
    description: str,
    instructions: list[str],
    cook_time: int = 0,
    *,
    catalog: ApplianceCatalog | None = None,
) -> RecipeAnalysisResult:
    """
    Analyze a recipe and suggest ChefIQ appliance actions.

    Never raises: analysis failures, catalog errors and invalid settings
    are logged and reported as a zero-confidence result.

    Args:
        title: Recipe title
        description: Recipe description
        instructions: Ordered instruction texts
        cook_time: Total cook time in minutes (0 if unknown)
        catalog: Appliance catalog override; defaults to the configured one

    Returns:
        RecipeAnalysisResult

    Examples:
        >>> result = analyze_recipe_for_chefiq(
        ...     "Sheet Pan Sausage", "", ["Preheat oven to 400°F", "Bake for 25 minutes"]
        ... )
        >>> result.suggested_actions[0].method_name
        'Bake'
    """
    from chefiq_analyzer.config import get_settings

    try:
        settings = get_settings()
        analyzer = RecipeAnalyzer(catalog if catalog is not None else get_default_catalog())
        result = analyzer.analyze(title, description, instructions, cook_time)
    except (ChefIQAnalyzerError, ValidationError) as e:
        logger.error(f"Failed to analyze recipe {title!r}: {e}")
        return RecipeAnalysisResult.empty(ANALYSIS_ERROR_REASON)

    if settings.log_reasoning:
        for line in result.reasoning:
            logger.debug(f"[{title}] {line}")

    return result
