"""
Question synthesis for the generator pipeline.
"""

from .synthesizer import EMPTY, SynthesisResult, find_sentence, select_paragraph, synthesize_question

__all__ = ["EMPTY", "SynthesisResult", "find_sentence", "select_paragraph", "synthesize_question"]
