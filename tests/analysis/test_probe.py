"""Tests for probe decisions and carry-over temperatures."""

from chefiq_analyzer.analysis.probe import (
    DEFAULT_PROBE_TEMP,
    extract_remove_temperature,
    find_protein,
    get_protein_temperature,
    needs_probe,
    should_use_remove_temp,
)


class TestNeedsProbe:
    def test_thermometer(self):
        assert needs_probe("cook until a thermometer reads 165") is True

    def test_internal_temperature(self):
        assert needs_probe("bake to an internal temperature of 145") is True

    def test_no_probe_wording(self):
        assert needs_probe("bake for 20 minutes") is False


class TestProteinTemperature:
    def test_poultry(self):
        assert get_protein_temperature("roast the chicken thighs") == 165
        assert get_protein_temperature("whole turkey") == 165

    def test_beef_medium_rare(self):
        assert get_protein_temperature("beef tenderloin") == 135

    def test_first_protein_in_table_order(self):
        # chicken comes before pork in the table regardless of text order
        assert find_protein("pork and chicken skewers") == "chicken"

    def test_default(self):
        assert find_protein("tofu steaks") is None
        assert get_protein_temperature("tofu steaks") == DEFAULT_PROBE_TEMP


class TestRemoveTemperature:
    """Tests for pulling food early so carry-over finishes it."""

    def test_explicit_pull_temperature(self):
        assert extract_remove_temperature("pull at 130°f and rest the beef", 135) == 130

    def test_explicit_temperature_before_remove(self):
        assert extract_remove_temperature("once it hits 155 degrees, remove from the oven", 165) == 155

    def test_explicit_too_far_below_target_ignored(self):
        # 100 is more than 15°F under 165, so the resting fallback applies
        assert extract_remove_temperature("remove at 100°f and let rest", 165) == 155

    def test_resting_high_target(self):
        assert extract_remove_temperature("let rest 10 minutes", 165) == 155

    def test_resting_low_target(self):
        assert extract_remove_temperature("let rest 5 minutes", 145) == 140

    def test_large_cut_without_rest(self):
        assert should_use_remove_temp("slice the brisket") is True
        assert extract_remove_temperature("slice the brisket", 135) == 130

    def test_no_carryover(self):
        assert should_use_remove_temp("serve hot") is False
        assert extract_remove_temperature("serve hot", 145) is None
