"""Reading recipe JSON files fed to the analyzer."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chefiq_analyzer.exceptions import RecipeInputError

from .models import RecipeInput

logger = logging.getLogger(__name__)


def _describe_error(error: ValidationError, data: dict) -> str:
    first = error.errors()[0]
    field = first["loc"][0] if first["loc"] else "recipe"
    empty = first["type"] in ("missing", "string_too_short", "too_short")
    if field == "title" and empty:
        return "Recipe is missing a title"
    if field == "instructions" and empty:
        return f"Recipe {data.get('title')!r} has no instructions"
    return f"Invalid recipe field {field!r}: {first['msg']}"


def recipe_from_dict(data: Any) -> RecipeInput:
    """
    Build a RecipeInput from a parsed recipe object.

    Raises:
        RecipeInputError: not an object, no title, no usable instructions,
            or a field of the wrong type
    """
    if not isinstance(data, dict):
        raise RecipeInputError("Recipe data must be a JSON object")

    try:
        return RecipeInput.model_validate(data)
    except ValidationError as e:
        raise RecipeInputError(_describe_error(e, data)) from e


def load_recipe_input(path: str | Path) -> RecipeInput:
    """Read a recipe JSON file from disk."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RecipeInputError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RecipeInputError(f"{path} is not valid JSON: {e}") from e

    recipe = recipe_from_dict(data)
    logger.info(f"Loaded recipe {recipe.title!r} ({len(recipe.instructions)} steps) from {path}")
    return recipe
