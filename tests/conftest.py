import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import mcq_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mcq_toolkit.core.models.questions import AnswerOption, Question, QuestionType  # noqa: E402


PARAGRAPH_ONE = (
    "Plants rely on the process of photosynthesis, which turns light into sugar. "
    "Every reaction obeys the law of conservation, so energy is never lost. "
    "Sunlight causes the leaves to produce sugar. "
    "Chlorophyll compared to carotene and xanthophyll, absorbs more red light. "
    "The cell is composed of membranes, which hold the pigments."
)

PARAGRAPH_TWO = (
    "Cellular respiration reverses the process of photosynthesis, releasing energy. "
    "Glucose leads to pyruvate in the cytoplasm. "
    "The law of conservation, again, holds inside the mitochondrion. "
    "Unlike carotene or xanthophyll, chlorophyll is green. "
    "The mitochondrion is made up of folded membranes, which increase surface area."
)


# Common test fixtures
@pytest.fixture
def biology_text() -> str:
    """Two paragraphs where every question type finds a sentence in both."""
    return f"{PARAGRAPH_ONE}\n\n{PARAGRAPH_TWO}"


@pytest.fixture
def plain_text() -> str:
    """Text with no cue phrases at all."""
    return "Hello world. This is plain text with no markers."


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for deterministic assertions."""
    return random.Random(1234)


@pytest.fixture
def sample_question() -> Question:
    """A valid definition question with the correct answer in second place."""
    return Question(
        id="q1",
        question_text="What is conservation?",
        options=(
            AnswerOption("q1_b", "xanthophyll is responsible for carotene's function"),
            AnswerOption("q1_a", "Every reaction obeys the law of conservation", is_correct=True),
            AnswerOption("q1_c", "membranes is involved in a different process"),
            AnswerOption("q1_d", "conservation operates independently of other processes"),
        ),
        cognitive_level=QuestionType.DEFINITION.cognitive_level,
        question_type=QuestionType.DEFINITION,
        source_reference="Paragraph 1",
        explanation='As stated in Paragraph 1: "Every reaction obeys the law of conservation"',
    )
