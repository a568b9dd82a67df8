"""
Core Models Package

Immutable, validated data models shared by every pipeline stage.

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation between pipeline stages
2. Safe to hand the same entities to concurrent generation runs
3. Collaborators record answers by creating new records
"""

from .entities import ExtractedEntities, Relationship
from .questions import (
    OPTION_COUNT,
    QUESTION_TEMPLATES,
    AnswerOption,
    CognitiveLevel,
    Difficulty,
    Question,
    QuestionType,
    score,
)

__all__ = [
    "ExtractedEntities",
    "Relationship",
    "OPTION_COUNT",
    "QUESTION_TEMPLATES",
    "AnswerOption",
    "CognitiveLevel",
    "Difficulty",
    "Question",
    "QuestionType",
    "score",
]
