"""
Module: generator.synthesis.synthesizer

Purpose:
    Build one question, its correct answer (a source sentence) and a
    source reference for a given question type, paragraph and entity set.

Key Functions:
    - synthesize_question(): Main entry point

Key Classes:
    - SynthesisResult: question text + answer + reference
    - EMPTY: Result signalling "nothing constructible for this slot"

Per-type strategy:
    definition   - random concept, first paragraph sentence mentioning it
    comparison   - random relationship, first sentence mentioning both terms
    sequencing   - random process, first sentence mentioning it
    cause-effect - first sentence with a causal verb; asks about its cause clause
    scenario     - random concept, first sentence mentioning it

Dependencies:
    - random (std): Injected generator for term selection
    - generator.extraction.patterns: Shared sentence/paragraph splitters

Used By:
    - generator.controller
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from mcq_toolkit.core.models.entities import ExtractedEntities
from mcq_toolkit.core.models.questions import QuestionType

from ..extraction.patterns import CAUSAL_PATTERN, split_paragraphs, split_sentences

logger = logging.getLogger(__name__)

# Words of the answer sentence used for {event} in sequencing templates
EVENT_WORDS = 4


@dataclass(frozen=True)
class SynthesisResult:
    """
    Output of one synthesis attempt (immutable).

    Attributes:
        question_text: Question shown to the user ("" when empty)
        correct_answer: Source sentence answering it ("" when empty)
        source_reference: "Paragraph N" ("" when empty)
    """
    question_text: str = ""
    correct_answer: str = ""
    source_reference: str = ""

    @property
    def is_empty(self) -> bool:
        """Check if the slot should be skipped (no question or no answer)."""
        return not self.question_text or not self.correct_answer


EMPTY = SynthesisResult()


def select_paragraph(text: str, paragraph_index: int) -> str:
    """
    Get the 1-based paragraph, or the whole text when out of range.

    A blank paragraph also falls back to the whole text.
    """
    paragraphs = split_paragraphs(text)
    if 1 <= paragraph_index <= len(paragraphs) and paragraphs[paragraph_index - 1].strip():
        return paragraphs[paragraph_index - 1]
    return text


def find_sentence(paragraph: str, *terms: str) -> str:
    """
    Find the first sentence containing every term (case-insensitive).

    Returns:
        The trimmed sentence, or "" if none matches
    """
    needles = [term.lower() for term in terms]
    for sentence in split_sentences(paragraph):
        lowered = sentence.lower()
        if all(needle in lowered for needle in needles):
            return sentence
    return ""


def synthesize_question(
    question_type: QuestionType,
    entities: ExtractedEntities,
    text: str,
    paragraph_index: int,
    *,
    rng: random.Random,
    randomize_templates: bool = False,
) -> SynthesisResult:
    """
    Build one question of the requested type.

    Args:
        question_type: Strategy to apply
        entities: Entities extracted from the full text
        text: Full source text
        paragraph_index: 1-based paragraph to draw the answer from
        rng: Random generator for term (and template) selection
        randomize_templates: Phrase the question with one of the type's
            templates instead of the fixed wording

    Returns:
        SynthesisResult, or EMPTY when the entity collection the type
        needs is empty or no sentence in the paragraph matches

    Example:
        >>> result = synthesize_question(
        ...     QuestionType.DEFINITION, entities, text, 1, rng=random.Random(1)
        ... )
        >>> result.question_text
        'What is gravity?'
    """
    paragraph = select_paragraph(text, paragraph_index)
    builder = _BUILDERS[question_type]
    built = builder(entities, paragraph, rng)
    if built is None:
        logger.debug(f"No {question_type.value} question in paragraph {paragraph_index}")
        return EMPTY

    question_text, answer, values = built
    if randomize_templates:
        template = rng.choice(question_type.templates)
        question_text = template.format_map(values)

    return SynthesisResult(
        question_text=question_text,
        correct_answer=answer,
        source_reference=f"Paragraph {paragraph_index}",
    )


# ─────────────────────────────────────────────────────────────────────────────
# Per-type Builders
#
# Each returns (fixed question text, answer sentence, template values) or
# None when the slot cannot be filled.
# ─────────────────────────────────────────────────────────────────────────────

_Built = Optional[tuple]


def _pick(rng: random.Random, collection: Sequence):
    """Uniform choice, None for an empty collection."""
    if not collection:
        return None
    return rng.choice(collection)


def _term_values(term: str) -> Dict[str, str]:
    return {"term": term, "concept": term, "principle": term, "process": term}


def _build_definition(entities: ExtractedEntities, paragraph: str, rng: random.Random) -> _Built:
    concept = _pick(rng, entities.concepts)
    if concept is None:
        return None
    sentence = find_sentence(paragraph, concept)
    if not sentence:
        return None
    return f"What is {concept}?", sentence, _term_values(concept)


def _build_cause_effect(entities: ExtractedEntities, paragraph: str, rng: random.Random) -> _Built:
    for sentence in split_sentences(paragraph):
        if CAUSAL_PATTERN.search(sentence):
            cause = CAUSAL_PATTERN.split(sentence, maxsplit=1)[0].strip()
            values = {"condition": cause, "action": cause, "event": cause}
            return f"What is the effect of {cause}?", sentence, values
    return None


def _build_comparison(entities: ExtractedEntities, paragraph: str, rng: random.Random) -> _Built:
    pair = _pick(rng, entities.relationships)
    if pair is None:
        return None
    term1, term2 = pair
    sentence = find_sentence(paragraph, term1, term2)
    if not sentence:
        return None
    return f"How does {term1} differ from {term2}?", sentence, {"term1": term1, "term2": term2}


def _build_sequencing(entities: ExtractedEntities, paragraph: str, rng: random.Random) -> _Built:
    process = _pick(rng, entities.processes)
    if process is None:
        return None
    sentence = find_sentence(paragraph, process)
    if not sentence:
        return None
    values = _term_values(process)
    values["event"] = " ".join(sentence.split()[:EVENT_WORDS])
    return f"What is the correct sequence in {process}?", sentence, values


def _build_scenario(entities: ExtractedEntities, paragraph: str, rng: random.Random) -> _Built:
    concept = _pick(rng, entities.concepts)
    if concept is None:
        return None
    sentence = find_sentence(paragraph, concept)
    if not sentence:
        return None
    return f"Which scenario best demonstrates {concept}?", sentence, _term_values(concept)


_BUILDERS: Dict[QuestionType, Callable[[ExtractedEntities, str, random.Random], _Built]] = {
    QuestionType.DEFINITION: _build_definition,
    QuestionType.CAUSE_EFFECT: _build_cause_effect,
    QuestionType.COMPARISON: _build_comparison,
    QuestionType.SEQUENCING: _build_sequencing,
    QuestionType.SCENARIO: _build_scenario,
}
