"""
MCQ Toolkit Core Package

Shared data models, schema validation and serialization used by the
generator and by collaborators that store or display question records.
"""

from .models import (
    AnswerOption,
    CognitiveLevel,
    Difficulty,
    ExtractedEntities,
    Question,
    QuestionType,
)

__all__ = [
    "AnswerOption",
    "CognitiveLevel",
    "Difficulty",
    "ExtractedEntities",
    "Question",
    "QuestionType",
]
