"""
Module: generator

Purpose:
    Pattern-based multiple-choice question generation. Turns a block of
    prose into questions with distractors, question-type tags and
    cognitive-level classification, without any language model.

Key Functions:
    - generate(): Main entry point, returns a list of Question
    - generate_questions(): Settings-based entry point with statistics
    - extract_entities(): Entity extraction stage
    - synthesize_question(): Question synthesis stage
    - generate_distractors(): Distractor stage
    - shuffle_options(): Option shuffling

Key Classes:
    - GenerationSettings: Configuration for one run
    - GenerationResult: Questions plus run statistics
    - GenerationError: Invalid request arguments

Dependencies:
    - re, random, logging, dataclasses (std)
    - mcq_toolkit.core.models: ExtractedEntities, Question

Used By:
    - Display and service layers that supply text and settings
"""

from .config import GenerationSettings
from .controller import (
    QUESTION_TYPE_CYCLE,
    GenerationError,
    GenerationResult,
    generate,
    generate_questions,
    plan_slots,
)
from .distractors import generate_distractors
from .extraction import extract_entities
from .shuffle import shuffle_options
from .synthesis import EMPTY, SynthesisResult, synthesize_question

__all__ = [
    # Config
    "GenerationSettings",
    # Controller
    "QUESTION_TYPE_CYCLE",
    "GenerationError",
    "GenerationResult",
    "generate",
    "generate_questions",
    "plan_slots",
    # Stages
    "extract_entities",
    "synthesize_question",
    "SynthesisResult",
    "EMPTY",
    "generate_distractors",
    "shuffle_options",
]
