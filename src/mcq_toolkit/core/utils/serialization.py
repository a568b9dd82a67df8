"""
Serialization Utilities

Provides to/from JSON utilities for generated question records.

- `serialize_*` and `deserialize_*` wrap the model to_dict()/from_dict()
- Deserialization validates the record first so a broken record fails
  with a ValidationError naming the offending field
- JSON Lines helpers let collaborators persist a generated set
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.questions import Question
from ..schemas.validator import validate_question_record, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.

    The output can be written to JSON and will pass schema validation.

    Args:
        question: Question instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the record first
        strict: Validate against the JSON schema as well

    Returns:
        Question instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_question_record(data, strict=strict)
    return Question.from_dict(data)


def questions_to_json(questions: Iterable[Question], *, indent: int | None = 2) -> str:
    """Serialize a question list to a JSON array string."""
    return json.dumps([serialize_question(q) for q in questions], indent=indent, ensure_ascii=False)


def questions_from_json(payload: str, *, strict: bool = False) -> list[Question]:
    """
    Parse a JSON array string back into questions.

    Raises:
        ValidationError: If the payload is not an array or a record is invalid
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", errors=[str(e)]) from e
    if not isinstance(data, list):
        raise ValidationError(f"Expected a JSON array, got {type(data).__name__}")
    return [deserialize_question(item, strict=strict) for item in data]


# ─────────────────────────────────────────────────────────────────────────────
# JSONL Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_questions_jsonl(
    path: Path,
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[Question]:
    """
    Load questions from a JSONL file.

    Args:
        path: Path to a .jsonl file, one question record per line
        validate: Whether to validate each question
        strict: Validate against the JSON schema as well

    Returns:
        List of Question instances

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any question is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")

    questions = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            try:
                data = json.loads(line)
                question = deserialize_question(data, validate=validate, strict=strict)
                questions.append(question)
            except (json.JSONDecodeError, ValidationError, ValueError, KeyError) as e:
                raise ValidationError(
                    f"Error parsing line {line_no}: {e}",
                    path=str(path),
                    errors=[str(e)]
                ) from e

    return questions


def save_questions_jsonl(questions: Iterable[Question], path: Path) -> None:
    """
    Save questions to a JSONL file.

    Args:
        questions: Question instances to save
        path: Output path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        for question in questions:
            data = serialize_question(question)
            f.write(json.dumps(data, ensure_ascii=False))
            f.write("\n")
