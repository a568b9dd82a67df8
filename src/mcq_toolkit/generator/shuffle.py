"""
Module: generator.shuffle

Purpose:
    Uniform random permutation of answer options so the correct answer's
    position is unpredictable.

Key Functions:
    - shuffle_options(): Shuffled copy of any sequence

Used By:
    - generator.controller
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def shuffle_options(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Return a shuffled copy of items; the input is never mutated.

    Random.shuffle is a Fisher-Yates shuffle, so every permutation is
    equally likely for a uniform generator.

    Args:
        items: Sequence to permute
        rng: Random generator (module-level generator when None)

    Returns:
        New list holding the same elements in random order
    """
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled
