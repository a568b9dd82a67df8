"""
Unit Tests for Schema Validation

Tests for the validator module.
"""

import pytest

from mcq_toolkit.core.schemas.validator import ValidationError, validate_question_record


class TestValidateQuestionRecord:
    """Tests for validate_question_record function."""

    @pytest.fixture
    def valid_record(self, sample_question) -> dict:
        """Serialized form of the sample question."""
        return sample_question.to_dict()

    def test_valid_record_passes(self, valid_record):
        """A serialized question validates in both modes."""
        validate_question_record(valid_record)
        validate_question_record(valid_record, strict=True)

    def test_missing_fields_listed(self, valid_record):
        """Missing required fields are reported together."""
        del valid_record["questionText"]
        del valid_record["options"]

        with pytest.raises(ValidationError) as exc_info:
            validate_question_record(valid_record)

        assert "Missing field: questionText" in exc_info.value.errors
        assert "Missing field: options" in exc_info.value.errors

    def test_unknown_question_type(self, valid_record):
        """questionType must be one of the five types."""
        valid_record["questionType"] = "essay"

        with pytest.raises(ValidationError, match="Invalid questionType") as exc_info:
            validate_question_record(valid_record)

        assert exc_info.value.path == "questionType"

    def test_level_must_match_type(self, valid_record):
        """cognitiveLevel must be the one derived from questionType."""
        valid_record["cognitiveLevel"] = "apply"

        with pytest.raises(ValidationError, match="does not match questionType"):
            validate_question_record(valid_record)

    def test_option_count(self, valid_record):
        """Exactly four options are required."""
        valid_record["options"] = valid_record["options"][:2]

        with pytest.raises(ValidationError, match="list of 4"):
            validate_question_record(valid_record)

    def test_no_correct_option(self, valid_record):
        """A record without a correct option is rejected."""
        for option in valid_record["options"]:
            option["isCorrect"] = False

        with pytest.raises(ValidationError, match="found 0"):
            validate_question_record(valid_record)

    def test_selected_option_must_exist(self, valid_record):
        """selectedOptionId has to name one of the options."""
        valid_record["selectedOptionId"] = "q7_a"

        with pytest.raises(ValidationError) as exc_info:
            validate_question_record(valid_record)

        assert exc_info.value.path == "selectedOptionId"

    def test_strict_rejects_unknown_fields(self, valid_record):
        """Strict mode enforces the JSON schema, including extra keys."""
        valid_record["difficulty"] = "hard"

        validate_question_record(valid_record)
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_question_record(valid_record, strict=True)

    def test_strict_checks_source_reference_format(self, valid_record):
        """Strict mode requires 'Paragraph N' references."""
        valid_record["sourceReference"] = "Page 3"

        with pytest.raises(ValidationError) as exc_info:
            validate_question_record(valid_record, strict=True)

        assert exc_info.value.path == "sourceReference"

    def test_non_dict_rejected(self):
        """Records must be JSON objects."""
        with pytest.raises(ValidationError, match="must be an object"):
            validate_question_record(["not", "a", "record"])
