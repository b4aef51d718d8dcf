"""Loading recipe files into analyzer input."""

from .loader import load_recipe_input, recipe_from_dict
from .models import RecipeInput

__all__ = [
    "RecipeInput",
    "load_recipe_input",
    "recipe_from_dict",
]
