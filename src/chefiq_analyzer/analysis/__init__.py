"""
Recipe text analysis.

Public surface:
- extract_temperature / extract_temperatures_with_context
- extract_cooking_time_from_instructions / extract_cooking_time
- extract_*_params (one per appliance method)
- analyze_recipe_for_chefiq (orchestrator)
"""

from chefiq_analyzer.analysis.analyzer import RecipeAnalyzer, analyze_recipe_for_chefiq
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
from chefiq_analyzer.analysis.temperature import (
    extract_temperature,
    extract_temperatures_with_context,
)
from chefiq_analyzer.analysis.timing import (
    extract_cooking_time,
    extract_cooking_time_from_instructions,
)

__all__ = [
    "RecipeAnalyzer",
    "analyze_recipe_for_chefiq",
    "extract_air_frying_params",
    "extract_broiling_params",
    "extract_cooking_time",
    "extract_cooking_time_from_instructions",
    "extract_dehydrating_params",
    "extract_pressure_cooking_params",
    "extract_roasting_params",
    "extract_searing_saute_params",
    "extract_slow_cooking_params",
    "extract_sous_vide_params",
    "extract_steaming_params",
    "extract_temperature",
    "extract_temperatures_with_context",
    "extract_toasting_params",
]
