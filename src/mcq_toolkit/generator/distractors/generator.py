"""
Module: generator.distractors.generator

Purpose:
    Produce exactly three plausible-but-wrong answers for a question.

Key Functions:
    - generate_distractors(): Main entry point

Algorithm (fixed order, no randomness):
    1. First relationship (t1, t2) -> "{t2} is responsible for {t1}'s function"
    2. First structure             -> "{structure} is involved in a different process"
    3. First concept               -> "{concept} operates independently of other processes"
    4. Top up from the difficulty's generic table; slot N takes entry N

Dependencies:
    - common.distractor_bank: Generic distractor table

Used By:
    - generator.controller
"""

from __future__ import annotations

import logging
from typing import List

from mcq_toolkit.common.distractor_bank import generic_distractors
from mcq_toolkit.core.models.entities import ExtractedEntities
from mcq_toolkit.core.models.questions import OPTION_COUNT, Difficulty

logger = logging.getLogger(__name__)

DISTRACTOR_COUNT = OPTION_COUNT - 1


def generate_distractors(
    correct_answer: str,
    entities: ExtractedEntities,
    difficulty: Difficulty | str,
) -> List[str]:
    """
    Build the wrong answers for a question.

    The correct answer is accepted for interface symmetry but not compared
    against; a source sentence that happens to equal a generic distractor
    is left as is.

    Args:
        correct_answer: The question's correct answer
        entities: Entities extracted from the source text
        difficulty: Tier selecting the generic top-up table

    Returns:
        Exactly three distractor strings

    Example:
        >>> generate_distractors("x", ExtractedEntities(), Difficulty.EASY)
        ['The process occurs in reverse', 'No interaction takes place', 'The structure is inactive']
    """
    distractors: List[str] = []

    if entities.relationships:
        term1, term2 = entities.relationships[0]
        distractors.append(f"{term2} is responsible for {term1}'s function")

    if entities.structures:
        distractors.append(f"{entities.structures[0]} is involved in a different process")

    if entities.concepts:
        distractors.append(f"{entities.concepts[0]} operates independently of other processes")

    entity_backed = len(distractors)
    table = generic_distractors(difficulty)
    while len(distractors) < DISTRACTOR_COUNT:
        distractors.append(table[len(distractors)])

    logger.debug(
        f"Distractors: {entity_backed} from entities, "
        f"{DISTRACTOR_COUNT - entity_backed} generic ({Difficulty(difficulty).value})"
    )
    return distractors
