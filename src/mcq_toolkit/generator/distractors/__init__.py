"""
Distractor generation for the generator pipeline.
"""

from .generator import DISTRACTOR_COUNT, generate_distractors

__all__ = ["DISTRACTOR_COUNT", "generate_distractors"]
