"""
Module: generator.config

Purpose:
    Settings for one generation run. Immutable value passed per call,
    validated on construction.

Key Classes:
    - GenerationSettings: Main configuration for generating questions

Dependencies:
    - dataclasses (std)

Used By:
    - generator.controller: Pipeline orchestrator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mcq_toolkit.core.models.questions import Difficulty


@dataclass(frozen=True)
class GenerationSettings:
    """
    Configuration for generating questions (immutable).

    Attributes:
        question_count: Number of generation slots (the result may be shorter)
        difficulty: Tier for generic distractors; accepts the enum or its value
        include_explanations: Attach 'As stated in ...' explanations
        cognitive_distribution: Report a per-level count with the result
        seed: Seed for a private generator; None uses the module-level random generator
        randomize_templates: Phrase questions with a random template per type
        bound_captures: Keep entity captures inside one sentence

    Invariants:
        - question_count > 0
        - difficulty is a Difficulty after construction

    Example:
        >>> settings = GenerationSettings(question_count=5, difficulty="hard")
        >>> settings.difficulty
        <Difficulty.HARD: 'hard'>
    """

    question_count: int = 10
    difficulty: Difficulty = Difficulty.MEDIUM
    include_explanations: bool = True
    cognitive_distribution: bool = True

    # Randomness
    seed: Optional[int] = None

    # Behaviour switches
    randomize_templates: bool = False
    bound_captures: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if isinstance(self.question_count, bool) or not isinstance(self.question_count, int):
            raise ValueError(f"question_count must be an integer: {self.question_count!r}")
        if self.question_count <= 0:
            raise ValueError(f"question_count must be positive: {self.question_count}")
        try:
            difficulty = Difficulty(self.difficulty)
        except ValueError:
            choices = ", ".join(d.value for d in Difficulty)
            raise ValueError(
                f"difficulty must be one of {choices}: {self.difficulty!r}"
            ) from None
        object.__setattr__(self, "difficulty", difficulty)
