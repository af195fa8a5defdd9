"""Inter-word gap measurements used for pause detection."""
from __future__ import annotations

from typing import List, Sequence

from articulation.models.transcription import TranscribedWord


def inter_word_gaps(words: Sequence[TranscribedWord]) -> List[float]:
    """Gap before each word after the first, in ms.

    ``gaps[k - 1]`` is ``words[k].start_ms - words[k - 1].end_ms``.
    """
    return [words[k].start_ms - words[k - 1].end_ms for k in range(1, len(words))]


def average_positive_gap(words: Sequence[TranscribedWord]) -> float:
    """Mean of the strictly positive gaps, or 0.0 when there are none."""
    gaps = [g for g in inter_word_gaps(words) if g > 0]
    if not gaps:
        return 0.0
    return sum(gaps) / len(gaps)


def long_pause_threshold(
    words: Sequence[TranscribedWord],
    multiplier: float,
    min_pause_ms: float,
) -> float:
    """Adaptive long-pause threshold: ``max(avg_gap * multiplier, min_pause_ms)``."""
    return max(average_positive_gap(words) * multiplier, min_pause_ms)
