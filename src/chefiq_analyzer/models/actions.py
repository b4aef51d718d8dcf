"""
Analysis output models.

CookingAction and RecipeAnalysisResult are what callers apply to a recipe.
All `cooking_time` values in action parameters are in seconds.
"""

import uuid
from dataclasses import dataclass

from pydantic import BaseModel, Field


ActionParams = dict[str, int | float | bool]


def _new_action_id() -> str:
    return str(uuid.uuid4())


class CookingAction(BaseModel):
    """One appliance program assigned to (optionally) one recipe step."""

    id: str = Field(default_factory=_new_action_id)
    appliance_id: str  # Appliance.category_id
    method_id: str  # "0".."5" for the cooker, METHOD_* for the oven
    method_name: str
    parameters: ActionParams = Field(default_factory=dict)
    step_index: int | None = None  # 0-based instruction index

    @property
    def cooking_time_seconds(self) -> int | None:
        value = self.parameters.get("cooking_time")
        return int(value) if value is not None else None


class RecipeAnalysisResult(BaseModel):
    """
    Everything the analyzer inferred about a recipe, with its reasoning trace.

    `probe_temp` is set only when `use_probe` is True; otherwise it is None.
    """

    suggested_appliance: str | None = None
    suggested_actions: list[CookingAction] = Field(default_factory=list)
    use_probe: bool | None = None
    probe_temp: int | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    reasoning: list[str] = Field(default_factory=list)

    @classmethod
    def empty(cls, reason: str) -> "RecipeAnalysisResult":
        """Zero-confidence result with a single reasoning line."""
        return cls(suggested_actions=[], confidence=0.0, reasoning=[reason])

    @property
    def primary_action(self) -> CookingAction | None:
        return self.suggested_actions[0] if self.suggested_actions else None


@dataclass(frozen=True)
class TemperatureStep:
    """A temperature found in a single instruction."""

    step: int
    temp: int
    is_increase: bool
