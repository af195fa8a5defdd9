"""Articulation (clarity/completeness) scoring from match records."""
from __future__ import annotations

from typing import Sequence

from articulation.models.match import MatchRecord, MatchStatus
from articulation.rules import DEFAULT_CONFIDENCE
from .numeric import clamp_0_100, percentage, round_half_up

CORRECT_WEIGHT = 0.4
COMPLETION_WEIGHT = 0.3
CONFIDENCE_WEIGHT = 0.3


def count_status(matches: Sequence[MatchRecord], status: MatchStatus) -> int:
    return sum(1 for m in matches if m.status is status)


def average_spoken_confidence(matches: Sequence[MatchRecord]) -> float:
    """Mean ASR confidence over matches that have a spoken word.

    Falls back to the default confidence when nothing was spoken.
    """
    spoken = [m.confidence for m in matches if m.is_spoken]
    if not spoken:
        return DEFAULT_CONFIDENCE
    return sum(spoken) / len(spoken)


def articulation_score(matches: Sequence[MatchRecord]) -> int:
    """Articulation score (0-100).

    Weighted combination:
    - 40% share of reference words read correctly
    - 30% share completed (neither skipped nor mispronounced)
    - 30% mean recognition confidence of spoken words (clear word boundaries)

    Args:
        matches: One MatchRecord per reference token

    Returns:
        Integer score in [0, 100]; 0 when there are no matches
    """
    total = len(matches)
    if total == 0:
        return 0

    correct_pct = percentage(count_status(matches, MatchStatus.CORRECT), total)
    completed = sum(
        1 for m in matches
        if m.status not in (MatchStatus.SKIPPED, MatchStatus.MISPRONOUNCED)
    )
    completed_pct = percentage(completed, total)
    confidence_pct = average_spoken_confidence(matches) * 100.0

    score = (
        CORRECT_WEIGHT * clamp_0_100(correct_pct)
        + COMPLETION_WEIGHT * clamp_0_100(completed_pct)
        + CONFIDENCE_WEIGHT * clamp_0_100(confidence_pct)
    )
    return round_half_up(clamp_0_100(score))


def accuracy(matches: Sequence[MatchRecord], words_expected: int) -> int:
    """Percentage of reference words read correctly, rounded."""
    if words_expected <= 0:
        return 0
    return round_half_up(
        clamp_0_100(percentage(count_status(matches, MatchStatus.CORRECT), words_expected))
    )
