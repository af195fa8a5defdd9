"""Reference text tokenization for alignment."""
from __future__ import annotations

import re
from typing import List

from .normalizer import normalize_token


def tokenize_reference(text: str) -> List[str]:
    """Tokenize reference text into normalized words.

    Example: "Hello, world." -> ["hello", "world"]

    Args:
        text: The reference text to tokenize

    Returns:
        List of normalized tokens; empty pieces are dropped
    """
    tokens = []
    for word in re.split(r"\s+", text):
        if not word:
            continue
        normalized = normalize_token(word)
        if normalized:
            tokens.append(normalized)
    return tokens
