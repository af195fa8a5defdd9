"""Fluency (pace and smoothness) scoring from the transcript."""
from __future__ import annotations

from typing import Sequence

import numpy as np

from articulation.models.hesitation import HesitationEvent, HesitationKind
from articulation.models.transcription import TranscribedWord
from .numeric import clamp_0_100, round_half_up

CONSISTENCY_WEIGHT = 0.4
PAUSE_WEIGHT = 0.3
HESITATION_WEIGHT = 0.3


def pace_consistency(words: Sequence[TranscribedWord]) -> float:
    """100 minus 50x the coefficient of variation of word durations."""
    if not words:
        return 0.0
    durations = np.asarray([w.duration_ms for w in words], dtype=np.float64)
    mean = float(np.mean(durations))
    if mean <= 0:
        return 100.0
    cv = float(np.std(durations)) / mean
    return clamp_0_100(100.0 - cv * 50.0)


def pause_appropriateness(
    words: Sequence[TranscribedWord], hesitations: Sequence[HesitationEvent]
) -> float:
    """Penalize long pauses relative to one allowed pause per ten words."""
    long_pauses = sum(1 for h in hesitations if h.kind is HesitationKind.LONG_PAUSE)
    allowance = max(1.0, len(words) / 10.0)
    return clamp_0_100(100.0 - (long_pauses / allowance) * 100.0)


def hesitation_frequency(
    words: Sequence[TranscribedWord], hesitations: Sequence[HesitationEvent]
) -> float:
    """Fewer hesitation events per word is better."""
    rate = len(hesitations) / max(1, len(words))
    return clamp_0_100(100.0 - rate * 500.0)


def fluency_score(
    words: Sequence[TranscribedWord], hesitations: Sequence[HesitationEvent]
) -> int:
    """Fluency score (0-100).

    Weighted combination:
    - 40% pace consistency (word duration spread)
    - 30% pause appropriateness (long pauses)
    - 30% hesitation frequency (all hesitation events)

    Args:
        words: Transcribed words
        hesitations: Output of the hesitation detector

    Returns:
        Integer score in [0, 100]; 0 when nothing was spoken
    """
    if not words:
        return 0
    score = (
        CONSISTENCY_WEIGHT * pace_consistency(words)
        + PAUSE_WEIGHT * pause_appropriateness(words, hesitations)
        + HESITATION_WEIGHT * hesitation_frequency(words, hesitations)
    )
    return round_half_up(clamp_0_100(score))


def overall_score(articulation: int, fluency: int) -> int:
    """60% articulation, 40% fluency."""
    return round_half_up(clamp_0_100(0.6 * articulation + 0.4 * fluency))
