"""
Schema Validation Package

Validates serialized question records before they are turned back into
Question objects.
"""

from .validator import (
    ValidationError,
    validate_question_record,
)

__all__ = [
    "ValidationError",
    "validate_question_record",
]
