"""
ChefIQ Recipe Analyzer - Heuristic recipe-text analysis.

Reads free-form recipe instructions and infers:
- Target cooking temperatures
- Total cooking time
- Which ChefIQ appliance method (and parameters) applies to which step

Entry point: chefiq_analyzer.analysis.analyze_recipe_for_chefiq
"""

__version__ = "1.0.0"
