"""
End-to-end tests for the generation pipeline.

Verifies:
1. Same seed produces identical output (determinism)
2. Different seeds produce variety in option order
3. Generated questions survive strict serialization round trips
"""

import random

import pytest

from mcq_toolkit import GenerationSettings, generate, generate_questions
from mcq_toolkit.core.utils.serialization import (
    load_questions_jsonl,
    questions_from_json,
    questions_to_json,
    save_questions_jsonl,
)

LECTURE = (
    "The theory of evolution, put simply, explains how species change.\n"
    "Natural selection produces adaptations over many generations. "
    "The mechanism of selection acts on variation, which arises from mutation.\n"
    "\n"
    "A cell is made up of organelles, each with a job. "
    "The nucleus differs from ribosomes and mitochondria, since it stores DNA. "
    "Mutation triggers new variation in a population. "
    "The theory of evolution, in short, links every species."
)


class TestSeedDeterminism:
    """Tests for deterministic generation with the same seed."""

    @pytest.mark.parametrize("seed", [0, 1, 42, 2024])
    def test_same_seed_same_questions(self, seed):
        """Identical seeds reproduce the run exactly."""
        settings = GenerationSettings(question_count=10, seed=seed)

        first = generate_questions(LECTURE, settings)
        second = generate_questions(LECTURE, settings)

        assert first.questions == second.questions

    def test_different_seeds_vary_option_order(self):
        """Across seeds the option order is not fixed."""
        orders = {
            tuple(o.id for o in generate(LECTURE, 1, "easy", True, rng=random.Random(seed))[0].options)
            for seed in range(30)
        }

        assert len(orders) > 1


class TestLectureOutput:
    """Checks on the questions generated from the lecture text."""

    @pytest.fixture
    def questions(self):
        return generate(LECTURE, 10, "hard", True, rng=random.Random(8))

    def test_expected_slots_survive(self, questions):
        """Sequencing in paragraph 2 and comparison in paragraph 1 are skipped."""
        assert [q.id for q in questions] == ["q1", "q2", "q4", "q5", "q6", "q7", "q8", "q10"]

    def test_definition_answer(self, questions):
        """The definition question quotes the first sentence naming the concept."""
        definition = questions[0]

        assert definition.question_text == "What is evolution?"
        assert definition.correct_option.text == "The theory of evolution, put simply, explains how species change"

    def test_cause_effect_in_second_paragraph(self, questions):
        """Paragraph 2's cause-effect question uses its own causal sentence."""
        cause_effect = next(q for q in questions if q.id == "q7")

        assert cause_effect.question_text == "What is the effect of Mutation?"
        assert cause_effect.source_reference == "Paragraph 2"

    def test_strict_json_round_trip(self, questions):
        """Generated questions validate against the JSON schema."""
        assert questions_from_json(questions_to_json(questions), strict=True) == questions

    def test_jsonl_round_trip_with_answers(self, questions, tmp_path):
        """Answered questions persist and score the same after loading."""
        answered = [q.with_selection(q.correct_option.id) for q in questions]
        path = tmp_path / "answers.jsonl"

        save_questions_jsonl(answered, path)
        loaded = load_questions_jsonl(path, strict=True)

        assert loaded == answered
        assert all(q.is_correct for q in loaded)
