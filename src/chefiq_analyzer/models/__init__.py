"""Analyzer data models."""

from chefiq_analyzer.models.actions import (
    ActionParams,
    CookingAction,
    RecipeAnalysisResult,
    TemperatureStep,
)

__all__ = [
    "ActionParams",
    "CookingAction",
    "RecipeAnalysisResult",
    "TemperatureStep",
]
