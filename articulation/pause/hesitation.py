"""Hesitation detection over the transcript alone (no reference needed)."""
from __future__ import annotations

from typing import List, Optional, Sequence

from articulation.alignment.normalizer import normalize_token
from articulation.config import DEFAULT_CONFIG, AnalysisConfig
from articulation.models.hesitation import HesitationEvent, HesitationKind
from articulation.models.transcription import TranscribedWord
from articulation.utils.logger import get_logger
from .gaps import inter_word_gaps, long_pause_threshold

logger = get_logger(__name__)


def word_context(words: Sequence[TranscribedWord], index: int, radius: int = 2) -> str:
    """Words within ``radius`` of ``index`` joined by spaces."""
    start = max(0, index - radius)
    end = min(len(words), index + radius + 1)
    return " ".join(w.text for w in words[start:end])


def detect_long_pauses(
    words: Sequence[TranscribedWord],
    config: Optional[AnalysisConfig] = None,
) -> List[HesitationEvent]:
    """Find gaps at or above the adaptive long-pause threshold.

    Each event is positioned at the end of the word preceding the gap.
    """
    config = config or DEFAULT_CONFIG
    if len(words) < 2:
        return []

    threshold = long_pause_threshold(words, config.long_pause_multiplier, config.min_pause_ms)
    events: List[HesitationEvent] = []
    for k, gap in enumerate(inter_word_gaps(words), start=1):
        if gap >= threshold:
            events.append(
                HesitationEvent(
                    timestamp_ms=words[k - 1].end_ms,
                    duration_ms=gap,
                    kind=HesitationKind.LONG_PAUSE,
                    context=word_context(words, k - 1, config.context_radius),
                )
            )
    logger.debug("long pause threshold %.0fms, %d long pauses", threshold, len(events))
    return events


def detect_word_hesitations(
    words: Sequence[TranscribedWord],
    config: Optional[AnalysisConfig] = None,
) -> List[HesitationEvent]:
    """Find filler words and immediate repeats of the previous spoken word."""
    config = config or DEFAULT_CONFIG
    events: List[HesitationEvent] = []
    prev: Optional[str] = None
    for k, w in enumerate(words):
        normalized = normalize_token(w.text)
        if normalized in config.filler_words:
            events.append(
                HesitationEvent(
                    timestamp_ms=w.start_ms,
                    duration_ms=w.duration_ms,
                    kind=HesitationKind.FILLER_WORD,
                    word=w.text,
                    context=word_context(words, k, config.context_radius),
                )
            )
        if k > 0 and normalized == prev:
            events.append(
                HesitationEvent(
                    timestamp_ms=w.start_ms,
                    duration_ms=w.duration_ms,
                    kind=HesitationKind.REPEATED_WORD,
                    word=w.text,
                    context=word_context(words, k, config.context_radius),
                )
            )
        prev = normalized
    return events


def detect_hesitations(
    words: Sequence[TranscribedWord],
    config: Optional[AnalysisConfig] = None,
) -> List[HesitationEvent]:
    """All hesitation events: long pauses first, then per-word events.

    Independent of the reference text. A repeated word here compares
    adjacent transcript words, unlike the aligner's ``repeated`` status
    which compares against the previous reference token.

    Args:
        words: Transcribed words in time order
        config: Thresholds and filler set (defaults used when None)

    Returns:
        List of HesitationEvent
    """
    if not words:
        return []
    return detect_long_pauses(words, config) + detect_word_hesitations(words, config)
