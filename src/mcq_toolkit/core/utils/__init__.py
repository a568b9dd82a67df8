"""
Utils Package

Serialization helpers for question records.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    questions_to_json,
    questions_from_json,
    load_questions_jsonl,
    save_questions_jsonl,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "questions_to_json",
    "questions_from_json",
    "load_questions_jsonl",
    "save_questions_jsonl",
]
