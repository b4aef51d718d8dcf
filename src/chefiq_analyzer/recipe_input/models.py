"""Data models for recipe input."""

from pydantic import BaseModel, Field, field_validator


class RecipeInput(BaseModel):
    """
    Recipe text ready for analysis.

    File shape: {"title", "description", "instructions", "cook_time_minutes"}.
    Unknown keys are ignored.
    """

    title: str = Field(min_length=1)
    description: str = ""
    instructions: list[str] = Field(min_length=1)
    cook_time_minutes: int = Field(default=0, ge=0)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("description", mode="before")
    @classmethod
    def none_description(cls, v):
        return v or ""

    @field_validator("instructions", mode="before")
    @classmethod
    def drop_blank_steps(cls, v):
        if isinstance(v, list):
            return [step.strip() if isinstance(step, str) else step for step in v if not isinstance(step, str) or step.strip()]
        return v
