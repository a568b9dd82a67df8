"""
Module: generator.extraction.patterns

Purpose:
    Cue-phrase regular expressions and the sentence/paragraph splitters
    shared by extraction and synthesis. Keeping both stages on the same
    splitters means a sentence found during extraction is the same
    sentence the synthesizer later quotes.

Key Functions:
    - split_sentences(): Split on . ! ? runs, trimmed, no empties
    - split_paragraphs(): Split on blank lines

Dependencies:
    - re (std)

Used By:
    - generator.extraction.extractor
    - generator.synthesis.synthesizer
"""

from __future__ import annotations

import re
from typing import List

# Phrase captures: the run of letters/whitespace right after the cue.
# Not sentence bounded; \s also spans newlines.
PROCESS_PATTERN = re.compile(
    r"(?:process of |steps in |stages of |cycle of |mechanism of )([a-z\s]+)",
    re.IGNORECASE,
)
STRUCTURE_PATTERN = re.compile(
    r"(?:structure of |composed of |made up of |contains |within )([a-z\s]+)",
    re.IGNORECASE,
)
CONCEPT_PATTERN = re.compile(
    r"(?:concept of |principle of |theory of |law of |definition of )([a-z\s]+)",
    re.IGNORECASE,
)

# Comparison cue followed by everything up to the next comma or period
COMPARISON_PATTERN = re.compile(
    r"(?:compared to|differs from|versus|vs\.|unlike)\s+([^,.]+)",
    re.IGNORECASE,
)
# Joins the two sides of a comparison ("x and y", "x or y")
TERM_JOIN_PATTERN = re.compile(r"\s+(?:and|or)\s+")

CAUSAL_PATTERN = re.compile(
    r"causes|results in|leads to|produces|triggers",
    re.IGNORECASE,
)

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
PARAGRAPH_BOUNDARY = re.compile(r"\r?\n[ \t]*\r?\n")


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences.

    Args:
        text: Any text

    Returns:
        Trimmed, non-empty sentences in order

    Example:
        >>> split_sentences("One. Two!  Three?")
        ['One', 'Two', 'Three']
    """
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_paragraphs(text: str) -> List[str]:
    """
    Split text on blank lines.

    Empty chunks are kept so paragraph numbering matches the raw layout.
    """
    return PARAGRAPH_BOUNDARY.split(text)
