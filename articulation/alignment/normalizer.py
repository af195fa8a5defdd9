"""Token normalization utilities for alignment."""
from __future__ import annotations

import re

# Punctuation stripped from every token before comparison
STRIP_PUNCTUATION = ".,!?;:'\"()[]{}"

_STRIP_RE = re.compile("[" + re.escape(STRIP_PUNCTUATION) + "]")


def normalize_token(token: str) -> str:
    """Normalize a token for alignment.

    Lowercases, removes the fixed punctuation set and trims surrounding
    whitespace. Inner whitespace is kept so multi-word items such as
    "you know" stay comparable.

    Args:
        token: The token string to normalize

    Returns:
        Normalized token string (may be empty)
    """
    token = token.lower()
    token = _STRIP_RE.sub("", token)
    return token.strip()