"""
Module: generator.extraction.extractor

Purpose:
    Scan raw text for lexically-marked processes, structures, concepts and
    comparison relationships. Deterministic: the same text always yields
    the same ExtractedEntities.

Key Functions:
    - extract_entities(): Main entry point

Algorithm:
    1. Split text into sentences
    2. Run the process/structure/concept cue scans over the whole text
       (or per sentence line when bound_captures=True)
    3. For each sentence, look for a comparison cue and split the
       captured span on " and " / " or "; exactly two terms -> a pair
    4. Trim and deduplicate the phrase collections

Dependencies:
    - generator.extraction.patterns: Cue expressions and splitters
    - core.models.entities: ExtractedEntities

Used By:
    - generator.controller
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from mcq_toolkit.core.models.entities import ExtractedEntities, Relationship

from .patterns import (
    COMPARISON_PATTERN,
    CONCEPT_PATTERN,
    PROCESS_PATTERN,
    STRUCTURE_PATTERN,
    TERM_JOIN_PATTERN,
    split_sentences,
)

logger = logging.getLogger(__name__)


def extract_entities(text: str, *, bound_captures: bool = False) -> ExtractedEntities:
    """
    Extract entities from a body of text.

    Args:
        text: Source text
        bound_captures: Scan each sentence line by line so a phrase capture
            never runs across a line break (e.g. into the next paragraph
            after an unpunctuated heading). Off by default, which keeps
            the whole-text scan where a capture runs on until the next
            character outside [a-z\\s].

    Returns:
        ExtractedEntities (all collections empty for text without cues)

    Example:
        >>> entities = extract_entities("Newton described the law of gravity.")
        >>> entities.concepts
        ('gravity',)
    """
    sentences = split_sentences(text)
    if bound_captures:
        scan_targets = [line for sentence in sentences for line in sentence.splitlines()]
    else:
        scan_targets = [text]

    entities = ExtractedEntities.build(
        processes=_capture(PROCESS_PATTERN, scan_targets),
        structures=_capture(STRUCTURE_PATTERN, scan_targets),
        concepts=_capture(CONCEPT_PATTERN, scan_targets),
        relationships=_find_relationships(sentences),
    )

    logger.debug(f"Extracted entities from {len(sentences)} sentences: {entities.counts}")
    return entities


def _capture(pattern: re.Pattern, targets: Iterable[str]) -> List[str]:
    """Collect group 1 of every match across targets, in order."""
    return [match.group(1) for target in targets for match in pattern.finditer(target)]


def _find_relationships(sentences: Iterable[str]) -> List[Relationship]:
    """Collect comparison pairs, one at most per sentence."""
    relationships = []
    for sentence in sentences:
        pair = _comparison_pair(sentence)
        if pair is not None:
            relationships.append(pair)
    return relationships


def _comparison_pair(sentence: str) -> Optional[Relationship]:
    """
    Find the term pair in a comparison sentence.

    Only the first comparison cue in the sentence is considered. Terms are
    trimmed but may be empty (e.g. "unlike cells and , so").
    """
    match = COMPARISON_PATTERN.search(sentence)
    if not match:
        return None
    terms = TERM_JOIN_PATTERN.split(match.group(1))
    if len(terms) != 2:
        return None
    return (terms[0].strip(), terms[1].strip())
