"""Pause and hesitation detection over transcribed speech."""
from .gaps import average_positive_gap, inter_word_gaps, long_pause_threshold
from .hesitation import (
    detect_hesitations,
    detect_long_pauses,
    detect_word_hesitations,
    word_context,
)

__all__ = [
    "average_positive_gap",
    "detect_hesitations",
    "detect_long_pauses",
    "detect_word_hesitations",
    "inter_word_gaps",
    "long_pause_threshold",
    "word_context",
]
