"""Per-aspect articulation metrics behind the headline scores."""
from __future__ import annotations

from typing import Sequence

from articulation.models.hesitation import HesitationEvent, HesitationKind
from articulation.models.match import MatchRecord, MatchStatus
from articulation.models.result import ArticulationBreakdown
from articulation.models.transcription import TranscribedWord
from articulation.pause.gaps import average_positive_gap
from .numeric import clamp_0_100, percentage, round_half_up


def articulation_breakdown(
    matches: Sequence[MatchRecord],
    hesitations: Sequence[HesitationEvent],
    words: Sequence[TranscribedWord],
) -> ArticulationBreakdown:
    """Detailed metrics for display and storage.

    - word_clarity: mean confidence over all transcribed words
    - syllable_completion: share of tokens read correctly or repeated
    - pause_placement: like the fluency pause term, at half the penalty
    - word_boundaries: currently the same signal as word_clarity
    - average_pause_ms: mean positive inter-word gap
    """
    if words:
        word_clarity = round_half_up(
            clamp_0_100(sum(w.confidence for w in words) / len(words) * 100.0)
        )
    else:
        word_clarity = 0

    completed = sum(
        1 for m in matches if m.status in (MatchStatus.CORRECT, MatchStatus.REPEATED)
    )
    syllable_completion = round_half_up(percentage(completed, len(matches)))

    long_pauses = sum(1 for h in hesitations if h.kind is HesitationKind.LONG_PAUSE)
    pause_placement = round_half_up(
        clamp_0_100(100.0 - (long_pauses / max(1.0, len(words) / 10.0)) * 50.0)
    )

    return ArticulationBreakdown(
        word_clarity=word_clarity,
        syllable_completion=syllable_completion,
        pause_placement=pause_placement,
        word_boundaries=word_clarity,
        hesitation_count=len(hesitations),
        average_pause_ms=round_half_up(average_positive_gap(words)),
    )
