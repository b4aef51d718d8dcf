"""
Pytest configuration and fixtures for ChefIQ Analyzer tests.
"""

import os

import pytest

# Set test environment before importing chefiq_analyzer modules
os.environ["CHEFIQ_ENV"] = "development"
os.environ["LOG_REASONING"] = "false"
os.environ.pop("APPLIANCE_CATALOG_PATH", None)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so tests that patch the environment see their values."""
    from chefiq_analyzer.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def bbq_ribs_recipe():
    """Two-temperature oven recipe (250°F for 2 h, then 350°F)."""
    return {
        "title": "Baked BBQ Baby Back Ribs",
        "description": "These baked BBQ baby back ribs are fall-off-the-bone delicious",
        "instructions": [
            "Preheat oven to 250 degrees F (120 degrees C).",
            "Tear off 4 sheets of aluminum foil big enough to enclose each rack of ribs.",
            "Spray each sheet of aluminum foil with vegetable cooking spray.",
            "Brush the ribs liberally with barbecue sauce.",
            "Season ribs all over with salt and pepper; wrap tightly in aluminum foil.",
            "Place ribs bone-side up in a large roasting pan; cover with a lid or more aluminum foil.",
            "Bake in the preheated oven for 2 hours.",
            "Increase oven temperature to 350 degrees F (175 degrees C).",
            "Remove ribs from foil and place back in roasting pan.",
            "Brush ribs with barbecue sauce and bake for an additional 30 minutes.",
        ],
        "cook_time_minutes": 30,
    }


@pytest.fixture
def sausage_bake_recipe():
    """Single-temperature sheet pan bake."""
    return {
        "title": "Sausage, Peppers, Onions, and Potato Bake",
        "description": "A hearty one-pan meal",
        "instructions": [
            "Preheat oven to 400 degrees F (200 degrees C).",
            "Place sausages, bell peppers, onions, and potatoes in a large baking dish.",
            "Drizzle with olive oil and season with salt and pepper.",
            "Toss everything together to coat evenly.",
            "Bake in the preheated oven for 20-25 minutes, or until sausages are cooked through.",
        ],
        "cook_time_minutes": 30,
    }


@pytest.fixture
def grilled_chicken_recipe():
    return {
        "title": "Grilled Chicken",
        "description": "Juicy grilled chicken breast",
        "instructions": [
            "Preheat grill to medium-high heat",
            "Season chicken with salt and pepper",
            "Grill chicken for 6-8 minutes per side",
        ],
        "cook_time_minutes": 15,
    }


@pytest.fixture
def beef_stew_recipe():
    """Sear and sauté, then pressure cook, all in the iQ Cooker."""
    return {
        "title": "Pressure Cooker Beef Stew",
        "description": "Hearty beef stew",
        "instructions": [
            "Sear the beef on all sides for 5 minutes.",
            "Saute the onions until soft.",
            "Add broth and pressure cook on high pressure for 35 minutes.",
            "Let pressure release naturally, then pressure cook the vegetables for 3 minutes.",
        ],
        "cook_time_minutes": 0,
    }


@pytest.fixture
def roast_chicken_recipe():
    """Roast with a thermometer check and a rest, so the probe is used."""
    return {
        "title": "Roast Chicken",
        "description": "Crisp roasted chicken",
        "instructions": [
            "Preheat oven to 425°F.",
            "Roast the whole chicken for 75 minutes until a thermometer reads 165°F.",
            "Let rest 10 minutes.",
        ],
        "cook_time_minutes": 0,
    }

