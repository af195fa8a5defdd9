"""Alignment utilities for matching reference text to transcribed speech."""
from .aligner import align_reference_to_transcript, align_tokens
from .edit_distance import levenshtein
from .normalizer import normalize_token
from .tokenizer import tokenize_reference

__all__ = [
    "align_reference_to_transcript",
    "align_tokens",
    "levenshtein",
    "normalize_token",
    "tokenize_reference",
]
