"""
Common helpers shared by the generator stages.

Modules:
- distractor_bank: Difficulty-indexed generic distractor sentences
"""

from .distractor_bank import GENERIC_DISTRACTORS, generic_distractors

__all__ = ["GENERIC_DISTRACTORS", "generic_distractors"]
