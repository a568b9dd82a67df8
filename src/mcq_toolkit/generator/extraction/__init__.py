"""
Entity extraction for the generator pipeline.
"""

from .extractor import extract_entities
from .patterns import split_paragraphs, split_sentences

__all__ = ["extract_entities", "split_paragraphs", "split_sentences"]
