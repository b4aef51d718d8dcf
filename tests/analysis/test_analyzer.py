"""
End-to-end tests for recipe analysis.
"""

import pytest

from chefiq_analyzer.analysis import analyzer as analyzer_module
from chefiq_analyzer.analysis.analyzer import (
    ANALYSIS_ERROR_REASON,
    NO_APPLIANCE_REASON,
    NO_METHOD_REASON,
    STOVETOP_ONLY_REASON,
    RecipeAnalyzer,
    analyze_recipe_for_chefiq,
)
from chefiq_analyzer.core.catalog import CHEFIQ_APPLIANCES, ApplianceCatalog
from chefiq_analyzer.core.enums import CookerMethod, OvenMethod, PressureLevel, PressureRelease
from chefiq_analyzer.exceptions import AnalysisError

CATALOG = ApplianceCatalog(CHEFIQ_APPLIANCES)
OVEN_ID = CATALOG.by_type("oven").category_id
COOKER_ID = CATALOG.by_type("cooker").category_id


def _analyze(recipe: dict, **kwargs):
    return analyze_recipe_for_chefiq(
        recipe["title"],
        recipe["description"],
        recipe["instructions"],
        recipe["cook_time_minutes"],
        **kwargs,
    )


# =============================================================================
# Oven Recipes
# =============================================================================


class TestTwoTemperatureBake:
    """Ribs baked low, then finished at a higher temperature."""

    def test_suggests_oven(self, bbq_ribs_recipe):
        result = _analyze(bbq_ribs_recipe)

        assert result.suggested_appliance == OVEN_ID
        assert result.confidence == 1.0
        assert result.use_probe is False
        assert result.probe_temp is None

    def test_primary_bake_uses_preheat_temperature(self, bbq_ribs_recipe):
        primary = _analyze(bbq_ribs_recipe).primary_action

        assert primary.method_id == OvenMethod.BAKE.value
        assert primary.method_name == "Bake"
        assert primary.parameters["target_cavity_temp"] == 250
        assert primary.step_index == 0

    def test_total_time_includes_additional_steps(self, bbq_ribs_recipe):
        primary = _analyze(bbq_ribs_recipe).primary_action
        # 2 h plus the "additional 30 minutes" phrase, counted by two patterns
        assert primary.parameters["cooking_time"] == 10800

    def test_increased_temperature_step(self, bbq_ribs_recipe):
        actions = _analyze(bbq_ribs_recipe).suggested_actions
        increase = actions[1]

        assert increase.method_name == "Bake (Increased Temp)"
        assert increase.parameters["target_cavity_temp"] == 350
        assert increase.parameters["cooking_time"] == 3600
        assert increase.step_index == 7

    def test_secondary_oven_methods(self, bbq_ribs_recipe):
        actions = _analyze(bbq_ribs_recipe).suggested_actions

        assert len(actions) == 4
        assert [a.method_id for a in actions[2:]] == [OvenMethod.ROAST.value, OvenMethod.BROIL.value]
        # defaults capped at a third of the 30 minute cook time
        assert actions[2].parameters["cooking_time"] == 600
        assert actions[3].parameters["cooking_time"] == 600

    def test_reasoning_trace(self, bbq_ribs_recipe):
        reasoning = _analyze(bbq_ribs_recipe).reasoning

        assert "Detected initial temperature: 250°F" in reasoning
        assert "Detected cooking time: 180 minutes from instructions" in reasoning
        assert any("prioritizing bake" in line for line in reasoning)
        assert "Suggested iQ MiniOven with Bake method." in reasoning


class TestSingleTemperatureBake:
    def test_one_bake_action(self, sausage_bake_recipe):
        result = _analyze(sausage_bake_recipe)

        assert len(result.suggested_actions) == 1
        action = result.primary_action
        assert action.method_id == OvenMethod.BAKE.value
        assert action.parameters["target_cavity_temp"] == 400
        assert action.parameters["cooking_time"] == 1500

    def test_cooking_time_reasoning(self, sausage_bake_recipe):
        reasoning = _analyze(sausage_bake_recipe).reasoning
        assert "Detected cooking time: 25 minutes from instructions" in reasoning


class TestProbeRecipe:
    def test_probe_targets(self, roast_chicken_recipe):
        result = _analyze(roast_chicken_recipe)
        primary = result.primary_action

        assert result.use_probe is True
        assert result.probe_temp == 165
        assert primary.method_id == OvenMethod.ROAST.value
        assert primary.parameters["target_probe_temp"] == 165
        assert primary.parameters["remove_probe_temp"] == 155
        assert primary.parameters["target_cavity_temp"] == 425
        assert primary.parameters["cooking_time"] == 4500

    def test_runner_up_bake(self, roast_chicken_recipe):
        actions = _analyze(roast_chicken_recipe).suggested_actions

        assert actions[1].method_id == OvenMethod.BAKE.value
        # capped at a third of the passed cook time, which is unknown here
        assert actions[1].parameters["cooking_time"] == 0

    def test_runner_up_with_cook_time(self, roast_chicken_recipe):
        actions = _analyze({**roast_chicken_recipe, "cook_time_minutes": 75}).suggested_actions
        assert actions[1].parameters["cooking_time"] == 1500


class TestDehydrateSuppression:
    def test_temperature_increase_keeps_bake(self):
        result = analyze_recipe_for_chefiq(
            "Apple Chips",
            "",
            [
                "Preheat oven to 150 degrees F.",
                "Dehydrate the apple slices for 2 hours.",
                "Increase oven temperature to 350 degrees F and bake for 10 minutes.",
            ],
        )

        method_ids = {a.method_id for a in result.suggested_actions}
        assert method_ids == {OvenMethod.BAKE.value}
        assert any("prioritizing bake" in line for line in result.reasoning)


# =============================================================================
# Cooker Recipes
# =============================================================================


class TestPressureCookRecipe:
    def test_primary_pressure_cook(self, beef_stew_recipe):
        result = _analyze(beef_stew_recipe)
        primary = result.primary_action

        assert result.suggested_appliance == COOKER_ID
        assert primary.method_id == str(CookerMethod.PRESSURE.value)
        assert primary.method_name == "Pressure Cook"
        assert primary.step_index == 2
        assert primary.parameters["pres_level"] == PressureLevel.HIGH
        assert primary.parameters["pres_release"] == PressureRelease.NATURAL
        assert primary.parameters["cooking_time"] == 2100

    def test_no_probe_for_cooker(self, beef_stew_recipe):
        result = _analyze(beef_stew_recipe)
        assert result.use_probe is False
        assert result.probe_temp is None

    def test_sear_before_pressure(self, beef_stew_recipe):
        actions = _analyze(beef_stew_recipe).suggested_actions

        assert len(actions) == 2
        sear = actions[1]
        assert sear.method_id == str(CookerMethod.SEAR_SAUTE.value)
        assert sear.step_index == 0
        assert sear.parameters["cooking_time"] == 0

    def test_sear_time_capped_by_cook_time(self, beef_stew_recipe):
        actions = _analyze({**beef_stew_recipe, "cook_time_minutes": 45}).suggested_actions
        assert actions[1].parameters["cooking_time"] == 600

        actions = _analyze({**beef_stew_recipe, "cook_time_minutes": 15}).suggested_actions
        assert actions[1].parameters["cooking_time"] == 300

    def test_release_reasoning(self, beef_stew_recipe):
        reasoning = _analyze(beef_stew_recipe).reasoning
        assert "Detected pressure release method: Natural Release" in reasoning


# =============================================================================
# Gates and Fallbacks
# =============================================================================


class TestGrilling:
    def test_grilled_chicken_moves_to_oven(self, grilled_chicken_recipe):
        result = _analyze(grilled_chicken_recipe)
        action = result.primary_action

        assert result.suggested_appliance == OVEN_ID
        assert result.confidence == 0.8
        assert action.method_id == OvenMethod.AIR_FRY.value
        assert action.parameters["cooking_time"] == 900
        assert action.step_index == 0
        assert result.use_probe is False
        assert "Detected grilling recipe with protein - suggesting oven as ChefIQ alternative." in result.reasoning

    def test_temperature_check_sets_probe(self):
        result = analyze_recipe_for_chefiq(
            "Grilled Pork Chops",
            "",
            ["Grill pork chops until internal temperature reaches 145 degrees"],
            12,
        )

        assert result.use_probe is True
        assert result.probe_temp == 145
        assert result.primary_action.parameters["target_probe_temp"] == 145


class TestNoSuggestion:
    def test_no_cooking_method(self):
        result = analyze_recipe_for_chefiq(
            "Simple Green Salad",
            "Fresh and light",
            ["Wash the lettuce", "Toss with dressing", "Serve chilled"],
        )

        assert result.confidence == 0
        assert result.suggested_actions == []
        assert result.reasoning == [NO_METHOD_REASON]

    def test_mix_and_serve(self):
        result = analyze_recipe_for_chefiq("Quick Mix", "", ["Mix ingredients in a bowl", "Serve immediately"])

        assert result.confidence == 0
        assert result.use_probe is None
        assert result.probe_temp is None
        assert result.suggested_actions == []
        assert result.reasoning == [NO_METHOD_REASON]

    def test_empty_recipe(self):
        result = analyze_recipe_for_chefiq("", "", [])
        assert result.confidence == 0
        assert result.suggested_actions == []

    def test_stovetop_only(self):
        result = analyze_recipe_for_chefiq(
            "Caramel Sauce",
            "",
            ["Melt sugar in a saucepan over low heat", "Whisk in cream until smooth"],
        )

        assert result.confidence == 0
        assert result.reasoning == [STOVETOP_ONLY_REASON]

    def test_storage_notes_ignored(self):
        result = analyze_recipe_for_chefiq(
            "Potato Salad",
            "Keeps well.\nStore in the refrigerator, or the freezer, away from the oven.",
            ["Toss potatoes with dressing"],
        )
        assert result.reasoning == [NO_METHOD_REASON]

    def test_missing_appliance(self, sausage_bake_recipe):
        cooker_only = ApplianceCatalog([CATALOG.by_type("cooker")])
        result = _analyze(sausage_bake_recipe, catalog=cooker_only)

        assert result.confidence == 0
        assert result.reasoning == [NO_APPLIANCE_REASON]


class TestErrorBoundary:
    """Unexpected failures are wrapped, then reported as an empty result."""

    @pytest.fixture
    def broken_extraction(self, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(analyzer_module, "extract_temperature", explode)

    def test_analyzer_raises_analysis_error(self, broken_extraction, sausage_bake_recipe):
        with pytest.raises(AnalysisError, match="boom"):
            RecipeAnalyzer(CATALOG).analyze(
                sausage_bake_recipe["title"],
                sausage_bake_recipe["description"],
                sausage_bake_recipe["instructions"],
            )

    def test_entry_point_returns_empty(self, broken_extraction, sausage_bake_recipe):
        result = _analyze(sausage_bake_recipe)

        assert result.confidence == 0
        assert result.suggested_actions == []
        assert result.reasoning == [ANALYSIS_ERROR_REASON]

    def test_invalid_settings_return_empty(self, monkeypatch, sausage_bake_recipe):
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        result = _analyze(sausage_bake_recipe)

        assert result.confidence == 0
        assert result.suggested_actions == []
        assert result.reasoning == [ANALYSIS_ERROR_REASON]


class TestDeterminism:
    def test_same_input_same_output(self, bbq_ribs_recipe):
        first = _analyze(bbq_ribs_recipe)
        second = _analyze(bbq_ribs_recipe)

        assert first.reasoning == second.reasoning
        assert [a.parameters for a in first.suggested_actions] == [
            a.parameters for a in second.suggested_actions
        ]
        # action ids are fresh per call
        assert first.primary_action.id != second.primary_action.id
