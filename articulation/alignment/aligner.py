"""Greedy alignment of reference tokens against transcribed words."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from articulation.config import DEFAULT_CONFIG, AnalysisConfig
from articulation.models.match import MatchRecord, MatchStatus
from articulation.models.transcription import TranscribedWord
from articulation.utils.logger import get_logger
from .edit_distance import levenshtein, within_distance
from .normalizer import normalize_token
from .tokenizer import tokenize_reference

logger = get_logger(__name__)


def tokenize_transcript(
    words: Sequence[TranscribedWord],
) -> Tuple[List[str], List[int]]:
    """Normalize transcribed words, dropping ones that normalize to nothing.

    Returns:
        - spoken_tokens: normalized text of each kept word
        - spoken_indices: index of each kept word in ``words``
    """
    spoken_tokens: List[str] = []
    spoken_indices: List[int] = []
    for idx, w in enumerate(words):
        normalized = normalize_token(w.text)
        if normalized:
            spoken_tokens.append(normalized)
            spoken_indices.append(idx)
    return spoken_tokens, spoken_indices


def _is_match(expected: str, spoken: str, threshold: int) -> bool:
    return expected == spoken or within_distance(expected, spoken, threshold)


def align_tokens(
    expected: Sequence[str],
    words: Sequence[TranscribedWord],
    config: Optional[AnalysisConfig] = None,
) -> List[MatchRecord]:
    """Align normalized reference tokens to transcribed words.

    Single forward pass with two pointers, ``i`` over the reference and
    ``j`` over the transcript; neither ever moves backwards. For each
    reference token, in order of precedence:

      exact / fuzzy match   -> correct, advance both
      next spoken matches   -> current spoken word is an insertion, advance j
      previous ref repeated -> repeated, advance both
      moderate divergence   -> mispronounced, advance both
      otherwise             -> skipped, advance i

    Returns exactly one MatchRecord per reference token.

    Args:
        expected: Normalized reference tokens
        words: Transcribed words in time order
        config: Thresholds (defaults used when None)

    Returns:
        List of MatchRecord, index-aligned with ``expected``
    """
    config = config or DEFAULT_CONFIG
    threshold = config.fuzzy_match_threshold
    spoken, spoken_indices = tokenize_transcript(words)
    n, m = len(expected), len(spoken)

    matches: List[MatchRecord] = []

    def emit(i: int, status: MatchStatus, j: Optional[int] = None) -> None:
        if j is None:
            matches.append(MatchRecord(expected_index=i, expected_word=expected[i], status=status))
            return
        word = words[spoken_indices[j]]
        matches.append(
            MatchRecord(
                expected_index=i,
                expected_word=expected[i],
                status=status,
                confidence=word.confidence,
                spoken_word=word.text,
                spoken_index=spoken_indices[j],
                timestamp_ms=word.start_ms,
                low_confidence=(
                    status is MatchStatus.CORRECT and word.confidence < config.min_confidence
                ),
            )
        )

    i = j = 0
    insertions = 0
    while i < n:
        if j >= m:
            # Transcript exhausted; everything left was not read
            for rest in range(i, n):
                emit(rest, MatchStatus.SKIPPED)
            break

        exp, spk = expected[i], spoken[j]

        if _is_match(exp, spk, threshold):
            emit(i, MatchStatus.CORRECT, j)
            i += 1
            j += 1
            continue

        # Next spoken word fits better: treat the current one as an inserted word
        if j + 1 < m and _is_match(exp, spoken[j + 1], threshold):
            insertions += 1
            j += 1
            continue

        if i > 0 and spk == expected[i - 1]:
            emit(i, MatchStatus.REPEATED, j)
            i += 1
            j += 1
            continue

        distance = levenshtein(exp, spk)
        if threshold < distance <= len(exp) / 2:
            emit(i, MatchStatus.MISPRONOUNCED, j)
            i += 1
            j += 1
            continue

        # Spoken word stays in place for the next reference token
        emit(i, MatchStatus.SKIPPED)
        i += 1

    logger.debug(
        "aligned %d reference tokens against %d spoken words (%d inserted)",
        n, m, insertions,
    )
    return matches


def align_reference_to_transcript(
    reference_text: str,
    words: Sequence[TranscribedWord],
    config: Optional[AnalysisConfig] = None,
) -> List[MatchRecord]:
    """Tokenize reference text and align it to the transcribed words."""
    return align_tokens(tokenize_reference(reference_text), words, config)
