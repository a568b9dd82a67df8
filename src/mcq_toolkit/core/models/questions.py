"""
Module: questions

Purpose:
    Provides the Question dataclass - the record handed back to the display
    layer for every generated multiple-choice question - together with the
    closed vocabularies it is built from (QuestionType, CognitiveLevel,
    Difficulty) and the AnswerOption it carries.

Key Functions:
    - QuestionType.cognitive_level: Fixed level derived from the type
    - QuestionType.templates: Phrasing templates for the type
    - Question.correct_option: The single option flagged correct
    - Question.with_selection(option_id): Copy with an answer recorded
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - generator.controller
    - core.utils.serialization
    - core.schemas.validator

Design Notes:
    Question is frozen. Recording a user's answer produces a new record
    via with_selection(); the generator never touches selected_option_id.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple

# Options per question: one correct answer + three distractors
OPTION_COUNT = 4


class CognitiveLevel(str, Enum):
    """Mental operation a question type is presumed to exercise."""
    REMEMBER = "remember"
    UNDERSTAND = "understand"
    APPLY = "apply"
    ANALYZE = "analyze"

    def __str__(self) -> str:
        return self.value


class Difficulty(str, Enum):
    """Difficulty tier used to pick generic distractors."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    def __str__(self) -> str:
        return self.value


class QuestionType(str, Enum):
    """
    Kind of question the synthesizer can build.

    Declaration order is the round-robin order used by the controller.
    """
    DEFINITION = "definition"
    CAUSE_EFFECT = "cause-effect"
    COMPARISON = "comparison"
    SEQUENCING = "sequencing"
    SCENARIO = "scenario"

    def __str__(self) -> str:
        return self.value

    @property
    def cognitive_level(self) -> CognitiveLevel:
        """Fixed cognitive level for this type (not independently settable)."""
        return _COGNITIVE_LEVELS[self]

    @property
    def templates(self) -> Tuple[str, ...]:
        """Alternative phrasings, used when template rotation is enabled."""
        return QUESTION_TEMPLATES[self]


_COGNITIVE_LEVELS: Dict[QuestionType, CognitiveLevel] = {
    QuestionType.DEFINITION: CognitiveLevel.REMEMBER,
    QuestionType.CAUSE_EFFECT: CognitiveLevel.UNDERSTAND,
    QuestionType.COMPARISON: CognitiveLevel.ANALYZE,
    QuestionType.SEQUENCING: CognitiveLevel.UNDERSTAND,
    QuestionType.SCENARIO: CognitiveLevel.APPLY,
}

QUESTION_TEMPLATES: Dict[QuestionType, Tuple[str, ...]] = {
    QuestionType.DEFINITION: (
        "What is the primary function of {term}?",
        "Which statement best defines {term}?",
        "What characterizes {term}?",
    ),
    QuestionType.CAUSE_EFFECT: (
        "What happens when {condition}?",
        "What is the direct result of {action}?",
        "Which outcome follows {event}?",
    ),
    QuestionType.COMPARISON: (
        "How does {term1} differ from {term2}?",
        "What distinguishes {term1} from {term2}?",
        "Which feature separates {term1} from {term2}?",
    ),
    QuestionType.SEQUENCING: (
        "What is the correct order of {process}?",
        "Which step follows {event} in {process}?",
        "What is the initial step in {process}?",
    ),
    QuestionType.SCENARIO: (
        "In which situation would {principle} be most applicable?",
        "Which example demonstrates {concept}?",
        "How would {term} be applied in a real-world context?",
    ),
}


@dataclass(frozen=True)
class AnswerOption:
    """
    One selectable answer (immutable).

    Attributes:
        id: Identifier unique within its question, e.g. "q3_a"
        text: Answer text shown to the user
        is_correct: Whether this is the right answer
    """
    id: str
    text: str
    is_correct: bool = False

    def to_dict(self) -> dict:
        """Serialize using the record's camelCase field names."""
        return {"id": self.id, "text": self.text, "isCorrect": self.is_correct}

    @classmethod
    def from_dict(cls, data: dict) -> AnswerOption:
        """Deserialize from dictionary."""
        return cls(id=data["id"], text=data["text"], is_correct=bool(data.get("isCorrect", False)))


@dataclass(frozen=True)
class Question:
    """
    Generated multiple-choice question (immutable).

    Attributes:
        id: Identifier unique within a generation run, e.g. "q7"
        question_text: The question shown to the user
        options: Exactly four answer options, already shuffled
        cognitive_level: Derived from question_type
        question_type: Which synthesis strategy produced the question
        source_reference: Paragraph the answer came from, e.g. "Paragraph 2"
        explanation: Optional explanation quoting the source sentence
        selected_option_id: Set only by collaborators once answered

    Invariants:
        - len(options) == 4
        - Exactly one option has is_correct=True
        - Option ids are unique
        - cognitive_level == question_type.cognitive_level
        - selected_option_id is None or names one of the options

    Example:
        >>> q.correct_option.text
        'Photosynthesis is the process of converting light into energy'
        >>> q.with_selection(q.correct_option.id).is_correct
        True
    """

    id: str
    question_text: str
    options: Tuple[AnswerOption, ...]
    cognitive_level: CognitiveLevel
    question_type: QuestionType
    source_reference: str
    explanation: Optional[str] = None
    selected_option_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if len(self.options) != OPTION_COUNT:
            raise ValueError(
                f"question {self.id!r} must have {OPTION_COUNT} options, got {len(self.options)}"
            )
        correct = [opt for opt in self.options if opt.is_correct]
        if len(correct) != 1:
            raise ValueError(
                f"question {self.id!r} must have exactly one correct option, got {len(correct)}"
            )
        ids = [opt.id for opt in self.options]
        if len(set(ids)) != len(ids):
            raise ValueError(f"question {self.id!r} has duplicate option ids: {ids}")
        if self.cognitive_level != self.question_type.cognitive_level:
            raise ValueError(
                f"question {self.id!r}: {self.question_type} questions are "
                f"{self.question_type.cognitive_level}, not {self.cognitive_level}"
            )
        if self.selected_option_id is not None and self.selected_option_id not in ids:
            raise ValueError(
                f"question {self.id!r}: unknown selected option {self.selected_option_id!r}"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Answer State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def correct_option(self) -> AnswerOption:
        """Get the option flagged correct."""
        return next(opt for opt in self.options if opt.is_correct)

    @property
    def is_answered(self) -> bool:
        """Check if a collaborator has recorded an answer."""
        return self.selected_option_id is not None

    @property
    def is_correct(self) -> Optional[bool]:
        """
        Check the recorded answer.

        Returns:
            None until answered, then whether the selection is correct
        """
        if self.selected_option_id is None:
            return None
        return self.selected_option_id == self.correct_option.id

    def with_selection(self, option_id: str) -> Question:
        """
        Record an answer.

        Args:
            option_id: Id of the chosen option

        Returns:
            New Question with selected_option_id set

        Raises:
            ValueError: If option_id is not one of this question's options
        """
        return replace(self, selected_option_id=option_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Optional fields are omitted when unset.

        Returns:
            Dict representation with camelCase keys
        """
        d = {
            "id": self.id,
            "questionText": self.question_text,
            "options": [opt.to_dict() for opt in self.options],
            "cognitiveLevel": self.cognitive_level.value,
            "questionType": self.question_type.value,
            "sourceReference": self.source_reference,
        }
        if self.explanation is not None:
            d["explanation"] = self.explanation
        if self.selected_option_id is not None:
            d["selectedOptionId"] = self.selected_option_id
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from dictionary.

        Args:
            data: Dict representation

        Returns:
            Question instance
        """
        return cls(
            id=data["id"],
            question_text=data["questionText"],
            options=tuple(AnswerOption.from_dict(opt) for opt in data["options"]),
            cognitive_level=CognitiveLevel(data["cognitiveLevel"]),
            question_type=QuestionType(data["questionType"]),
            source_reference=data["sourceReference"],
            explanation=data.get("explanation"),
            selected_option_id=data.get("selectedOptionId"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id!r}, type={self.question_type.value}, "
            f"level={self.cognitive_level.value}, source={self.source_reference!r})"
        )


def score(questions) -> int:
    """
    Count correctly answered questions.

    Args:
        questions: Iterable of Question

    Returns:
        Number of questions whose recorded answer is correct
    """
    return sum(1 for q in questions if q.is_correct)
