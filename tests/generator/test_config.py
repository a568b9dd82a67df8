"""
Unit tests for GenerationSettings.
"""

import pytest

from mcq_toolkit.core.models.questions import Difficulty
from mcq_toolkit.generator.config import GenerationSettings


class TestGenerationSettings:
    """Tests for GenerationSettings dataclass."""

    def test_defaults(self):
        """Defaults match the settings form."""
        settings = GenerationSettings()

        assert settings.question_count == 10
        assert settings.difficulty is Difficulty.MEDIUM
        assert settings.include_explanations is True
        assert settings.cognitive_distribution is True
        assert settings.seed is None

    def test_difficulty_string_is_coerced(self):
        """A difficulty value string becomes the enum."""
        assert GenerationSettings(difficulty="hard").difficulty is Difficulty.HARD

    def test_unknown_difficulty_raises(self):
        """Unknown tiers are rejected with the allowed choices."""
        with pytest.raises(ValueError, match="easy, medium, hard"):
            GenerationSettings(difficulty="extreme")

    @pytest.mark.parametrize("count", [0, -5])
    def test_non_positive_count_raises(self, count):
        """question_count must be positive."""
        with pytest.raises(ValueError, match="question_count must be positive"):
            GenerationSettings(question_count=count)

    @pytest.mark.parametrize("count", [2.5, "10", True])
    def test_non_integer_count_raises(self, count):
        """question_count must be an int."""
        with pytest.raises(ValueError, match="must be an integer"):
            GenerationSettings(question_count=count)

    def test_any_positive_count_accepted(self):
        """Counts outside the usual 5/10/15/20 are fine."""
        assert GenerationSettings(question_count=7).question_count == 7

    def test_settings_are_immutable(self):
        """Settings cannot be changed after construction."""
        settings = GenerationSettings()

        with pytest.raises(AttributeError):
            settings.question_count = 5
