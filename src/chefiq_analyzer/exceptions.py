"""Exceptions raised inside the analyzer."""


class ChefIQAnalyzerError(Exception):
    """Base class for analyzer errors."""


class AnalysisError(ChefIQAnalyzerError):
    """Unexpected failure while analyzing a recipe."""


class CatalogError(ChefIQAnalyzerError):
    """Appliance catalog file is missing or malformed."""


class RecipeInputError(ChefIQAnalyzerError, ValueError):
    """Recipe file could not be read into a RecipeInput."""
