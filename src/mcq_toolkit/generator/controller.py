"""
Module: generator.controller

Purpose:
    Orchestrate the question generation pipeline.
    Extract → (per slot) Synthesize → Distractors → Shuffle → Assemble

Key Functions:
    - generate(): Entry point for collaborators, returns the question list
    - generate_questions(): Settings-based entry point, returns GenerationResult
    - plan_slots(): (question type, paragraph) for every slot

Key Classes:
    - GenerationResult: Questions plus run statistics
    - GenerationError: Exception for invalid call arguments

Dependencies:
    - generator.extraction: Entity extraction
    - generator.synthesis: Question synthesis
    - generator.distractors: Distractor generation
    - generator.shuffle: Option shuffling

Used By:
    - Display/service layers supplying text and settings
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from types import ModuleType
from typing import Dict, List, Optional, Tuple, Union

from mcq_toolkit.core.models.entities import ExtractedEntities
from mcq_toolkit.core.models.questions import (
    AnswerOption,
    CognitiveLevel,
    Difficulty,
    Question,
    QuestionType,
)

from .config import GenerationSettings
from .distractors import generate_distractors
from .extraction import extract_entities
from .shuffle import shuffle_options
from .synthesis import SynthesisResult, synthesize_question

logger = logging.getLogger(__name__)

# Round-robin order of question types across slots
QUESTION_TYPE_CYCLE: Tuple[QuestionType, ...] = tuple(QuestionType)

# A Random instance, or the random module itself (same choice/shuffle API)
RandomSource = Union[random.Random, ModuleType]


class GenerationError(Exception):
    """Error in the arguments of a generation request."""
    pass


@dataclass(frozen=True)
class GenerationResult:
    """
    Complete generation result (immutable).

    Attributes:
        questions: Generated questions, in slot order
        requested: Number of slots attempted
        skipped: Slots that produced no question
        entity_counts: Size of each extracted entity collection
        cognitive_distribution: Questions per cognitive level, or None
            when the setting is off

    Example:
        >>> result = generate_questions(text, GenerationSettings(question_count=10))
        >>> print(f"{len(result.questions)} of {result.requested} slots filled")
    """
    questions: Tuple[Question, ...]
    requested: int
    skipped: int
    entity_counts: Dict[str, int]
    cognitive_distribution: Optional[Dict[CognitiveLevel, int]] = None


def plan_slots(count: int) -> List[Tuple[QuestionType, int]]:
    """
    Get (question type, 1-based paragraph) for each slot.

    Types cycle in QUESTION_TYPE_CYCLE order; every full cycle moves on
    to the next paragraph.

    Example:
        >>> plan_slots(6)[4:]
        [(<QuestionType.SCENARIO: 'scenario'>, 1), (<QuestionType.DEFINITION: 'definition'>, 2)]
    """
    cycle = len(QUESTION_TYPE_CYCLE)
    return [(QUESTION_TYPE_CYCLE[i % cycle], i // cycle + 1) for i in range(count)]


def generate(
    text: str,
    question_count: int,
    difficulty: Difficulty | str = Difficulty.MEDIUM,
    include_explanations: bool = True,
    *,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Generate multiple-choice questions from text.

    Args:
        text: Source text, already extracted by the input layer
        question_count: Number of slots to attempt (any positive integer)
        difficulty: "easy", "medium" or "hard"
        include_explanations: Attach explanations quoting the source
        rng: Random generator; the module-level random generator when None

    Returns:
        Up to question_count questions; fewer, possibly none, when the
        text lacks the cues a question type needs

    Raises:
        GenerationError: If text is not a string or a setting is invalid

    Example:
        >>> questions = generate(text, 10, "medium", True)
        >>> all(len(q.options) == 4 for q in questions)
        True
    """
    try:
        settings = GenerationSettings(
            question_count=question_count,
            difficulty=difficulty,
            include_explanations=include_explanations,
            cognitive_distribution=False,
        )
    except ValueError as e:
        raise GenerationError(f"Invalid generation settings: {e}") from e
    return list(generate_questions(text, settings, rng=rng).questions)


def generate_questions(
    text: str,
    settings: GenerationSettings,
    *,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """
    Run the pipeline for one request.

    Pipeline:
    1. Extract entities once
    2. For each slot: synthesize; skip the slot if empty
    3. Generate distractors, build options, shuffle
    4. Assemble the Question record

    Args:
        text: Source text
        settings: Generation settings
        rng: Random generator; overrides settings.seed when given

    Returns:
        GenerationResult with questions and statistics

    Raises:
        GenerationError: If text is not a string
    """
    if not isinstance(text, str):
        raise GenerationError(f"text must be a string, got {type(text).__name__}")

    rng = _resolve_rng(rng, settings.seed)
    entities = extract_entities(text, bound_captures=settings.bound_captures)

    logger.info(
        f"Generating {settings.question_count} questions "
        f"({settings.difficulty.value}) from {len(text)} characters"
    )
    if entities.is_empty:
        logger.info("No cue phrases found in text")

    questions: List[Question] = []
    for index, (question_type, paragraph_index) in enumerate(plan_slots(settings.question_count)):
        synthesis = synthesize_question(
            question_type,
            entities,
            text,
            paragraph_index,
            rng=rng,
            randomize_templates=settings.randomize_templates,
        )
        if synthesis.is_empty:
            logger.debug(f"Slot {index}: skipped {question_type.value} (paragraph {paragraph_index})")
            continue

        questions.append(
            _assemble_question(index, question_type, synthesis, entities, settings, rng)
        )

    skipped = settings.question_count - len(questions)
    logger.info(f"Generated {len(questions)} questions, skipped {skipped} slots")

    distribution = None
    if settings.cognitive_distribution:
        levels = Counter(q.cognitive_level for q in questions)
        distribution = {level: levels.get(level, 0) for level in CognitiveLevel}

    return GenerationResult(
        questions=tuple(questions),
        requested=settings.question_count,
        skipped=skipped,
        entity_counts=entities.counts,
        cognitive_distribution=distribution,
    )


def _resolve_rng(rng: Optional[random.Random], seed: Optional[int]) -> RandomSource:
    """Pick the injected generator, a seeded one, or the module-level one."""
    if rng is not None:
        return rng
    if seed is not None:
        return random.Random(seed)
    return random


def _assemble_question(
    index: int,
    question_type: QuestionType,
    synthesis: SynthesisResult,
    entities: ExtractedEntities,
    settings: GenerationSettings,
    rng: RandomSource,
) -> Question:
    """Build the options for one slot and wrap everything in a Question."""
    question_id = f"q{index + 1}"
    distractors = generate_distractors(synthesis.correct_answer, entities, settings.difficulty)

    # Correct answer is always "_a"; distractors follow as "_b".."_d"
    options = [AnswerOption(id=f"{question_id}_a", text=synthesis.correct_answer, is_correct=True)]
    options.extend(
        AnswerOption(id=f"{question_id}_{chr(ord('b') + j)}", text=distractor)
        for j, distractor in enumerate(distractors)
    )

    explanation = None
    if settings.include_explanations:
        explanation = f'As stated in {synthesis.source_reference}: "{synthesis.correct_answer}"'

    return Question(
        id=question_id,
        question_text=synthesis.question_text,
        options=tuple(shuffle_options(options, rng)),
        cognitive_level=question_type.cognitive_level,
        question_type=question_type,
        source_reference=synthesis.source_reference,
        explanation=explanation,
    )
