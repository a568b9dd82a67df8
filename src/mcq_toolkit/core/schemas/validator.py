"""
Schema Validation Utilities

Validates serialized question records (the dicts produced by
Question.to_dict()) before deserialization.

Two levels:
- Basic (default): required fields, vocabularies, option invariants
- Strict: additionally validates against question.schema.json with
  jsonschema, which also rejects unknown fields
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..models.questions import OPTION_COUNT, CognitiveLevel, QuestionType

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question_record(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a serialized question record.

    Args:
        data: Question dictionary to validate
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Question record must be an object, got {type(data).__name__}")

    required = ["id", "questionText", "options", "cognitiveLevel", "questionType", "sourceReference"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    try:
        question_type = QuestionType(data["questionType"])
    except ValueError:
        raise ValidationError(
            f"Invalid questionType: {data['questionType']!r}",
            path="questionType"
        ) from None

    try:
        level = CognitiveLevel(data["cognitiveLevel"])
    except ValueError:
        raise ValidationError(
            f"Invalid cognitiveLevel: {data['cognitiveLevel']!r}",
            path="cognitiveLevel"
        ) from None

    if level != question_type.cognitive_level:
        raise ValidationError(
            f"cognitiveLevel {level.value!r} does not match questionType "
            f"{question_type.value!r} (expected {question_type.cognitive_level.value!r})",
            path="cognitiveLevel"
        )

    _validate_options(data["options"], data.get("selectedOptionId"))

    if strict:
        schema = _load_schema("question")
        validator = jsonschema.Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
        if errors:
            first = errors[0]
            raise ValidationError(
                f"Schema validation failed: {first.message}",
                path="/".join(str(p) for p in first.path),
                errors=[e.message for e in errors]
            )


def _validate_options(options: Any, selected_option_id: Any) -> None:
    """Check option count, single correct answer and id uniqueness."""
    if not isinstance(options, list) or len(options) != OPTION_COUNT:
        count = len(options) if isinstance(options, list) else type(options).__name__
        raise ValidationError(
            f"options must be a list of {OPTION_COUNT}, got {count}",
            path="options"
        )

    ids = []
    correct = 0
    for index, option in enumerate(options):
        if not isinstance(option, dict) or "id" not in option or "text" not in option:
            raise ValidationError(
                f"Option {index} must have 'id' and 'text'",
                path=f"options/{index}"
            )
        ids.append(option["id"])
        if option.get("isCorrect") is True:
            correct += 1

    if correct != 1:
        raise ValidationError(
            f"Exactly one option must be correct, found {correct}",
            path="options"
        )
    if len(set(ids)) != len(ids):
        raise ValidationError(f"Duplicate option ids: {ids}", path="options")
    if selected_option_id is not None and selected_option_id not in ids:
        raise ValidationError(
            f"selectedOptionId {selected_option_id!r} is not one of {ids}",
            path="selectedOptionId"
        )
