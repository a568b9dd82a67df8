"""Generic distractor sentences, three per difficulty tier.

Used to top up the entity-backed distractors so every question has
exactly three wrong answers. Table order is significant: the generator
fills slot N from entry N.
"""

from __future__ import annotations

from typing import Dict, Tuple

from mcq_toolkit.core.models.questions import Difficulty

GENERIC_DISTRACTORS: Dict[Difficulty, Tuple[str, str, str]] = {
    Difficulty.EASY: (
        "The process occurs in reverse",
        "No interaction takes place",
        "The structure is inactive",
    ),
    Difficulty.MEDIUM: (
        "The relationship is indirect",
        "Multiple steps are skipped",
        "The effect is temporary",
    ),
    Difficulty.HARD: (
        "The mechanism is substrate-independent",
        "Regulation occurs at a different level",
        "The pathway is non-linear",
    ),
}


def generic_distractors(difficulty: Difficulty | str) -> Tuple[str, str, str]:
    """Get the generic table for a tier (accepts the enum or its value)."""
    return GENERIC_DISTRACTORS[Difficulty(difficulty)]
