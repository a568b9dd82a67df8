"""
Module: entities

Purpose:
    Provides the ExtractedEntities dataclass - the result of scanning one
    body of text for lexically-marked processes, structures, concepts and
    comparison relationships. Computed once per generation run and passed
    read-only to every later stage.

Key Functions:
    - ExtractedEntities.is_empty: True when nothing was extracted
    - ExtractedEntities.counts: Per-collection sizes for logging/reporting
    - ExtractedEntities.to_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - generator.extraction.extractor
    - generator.synthesis.synthesizer
    - generator.distractors.generator
    - generator.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

# (term_a, term_b) found in a comparison construction
Relationship = Tuple[str, str]


def _dedupe(phrases: Iterable[str]) -> Tuple[str, ...]:
    """Drop blanks and duplicates, first occurrence wins."""
    seen: Dict[str, None] = {}
    for phrase in phrases:
        phrase = phrase.strip()
        if phrase:
            seen.setdefault(phrase, None)
    return tuple(seen)


@dataclass(frozen=True)
class ExtractedEntities:
    """
    Entities extracted from a source text (immutable).

    Phrase collections are stored as tuples so "first element" is well
    defined for the distractor generator and random choice works directly.

    Attributes:
        processes: Distinct phrases introduced by process cues ("process of")
        structures: Distinct phrases introduced by structure cues ("composed of")
        concepts: Distinct phrases introduced by concept cues ("law of")
        relationships: Term pairs from comparison cues, discovery order,
            duplicates allowed

    Invariants:
        - Phrase collections are trimmed, deduplicated, never contain ""
        - relationships are NOT deduplicated

    Example:
        >>> entities = ExtractedEntities.build(concepts=["gravity", "gravity "])
        >>> entities.concepts
        ('gravity',)
    """

    processes: Tuple[str, ...] = ()
    structures: Tuple[str, ...] = ()
    concepts: Tuple[str, ...] = ()
    relationships: Tuple[Relationship, ...] = ()

    @classmethod
    def build(
        cls,
        processes: Iterable[str] = (),
        structures: Iterable[str] = (),
        concepts: Iterable[str] = (),
        relationships: Iterable[Relationship] = (),
    ) -> ExtractedEntities:
        """
        Create entities from raw captures, applying trim + dedup.

        Args:
            processes: Raw process captures
            structures: Raw structure captures
            concepts: Raw concept captures
            relationships: Term pairs, kept as given

        Returns:
            Normalized ExtractedEntities
        """
        return cls(
            processes=_dedupe(processes),
            structures=_dedupe(structures),
            concepts=_dedupe(concepts),
            relationships=tuple((a, b) for a, b in relationships),
        )

    @property
    def is_empty(self) -> bool:
        """Check if no entity of any kind was found."""
        return not (self.processes or self.structures or self.concepts or self.relationships)

    @property
    def counts(self) -> Dict[str, int]:
        """Get size of each collection."""
        return {
            "processes": len(self.processes),
            "structures": len(self.structures),
            "concepts": len(self.concepts),
            "relationships": len(self.relationships),
        }

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "processes": list(self.processes),
            "structures": list(self.structures),
            "concepts": list(self.concepts),
            "relationships": [list(pair) for pair in self.relationships],
        }

    @classmethod
    def from_dict(cls, data: dict) -> ExtractedEntities:
        """Deserialize from dictionary."""
        return cls.build(
            processes=data.get("processes", []),
            structures=data.get("structures", []),
            concepts=data.get("concepts", []),
            relationships=[tuple(pair) for pair in data.get("relationships", [])],
        )
