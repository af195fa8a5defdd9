"""Read-aloud articulation analysis pipeline."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from articulation.alignment.aligner import align_tokens
from articulation.alignment.tokenizer import tokenize_reference
from articulation.config import DEFAULT_CONFIG, AnalysisConfig
from articulation.errors import ArticulationError, InvalidInputError
from articulation.models.result import AnalysisResult
from articulation.models.transcription import Transcription, validate_words
from articulation.pause.hesitation import detect_hesitations
from articulation.problem_words import extract_problem_words
from articulation.scorer.articulation import accuracy, articulation_score
from articulation.scorer.breakdown import articulation_breakdown
from articulation.scorer.fluency import fluency_score, overall_score
from articulation.utils.logger import get_logger

logger = get_logger(__name__)

TranscriptionInput = Union[Transcription, Mapping[str, Any]]


def _validate_inputs(
    reference_text: Any,
    transcription: TranscriptionInput,
    audio_duration_ms: Any,
    config: AnalysisConfig,
) -> Tuple[List[str], Transcription]:
    """Validate everything up front; returns (tokens, Transcription)."""
    config.validate()

    if not isinstance(reference_text, str) or not reference_text.strip():
        raise InvalidInputError("reference_text must be a non-empty string")
    tokens = tokenize_reference(reference_text)
    if not tokens:
        raise InvalidInputError("reference_text contains no readable words")

    if isinstance(audio_duration_ms, bool) or not isinstance(audio_duration_ms, (int, float)):
        raise InvalidInputError(f"audio_duration_ms must be a number, got {audio_duration_ms!r}")
    if audio_duration_ms <= 0:
        raise InvalidInputError(f"audio_duration_ms must be > 0, got {audio_duration_ms}")

    if isinstance(transcription, Transcription):
        validate_words(transcription.words)
        parsed = transcription
    elif isinstance(transcription, Mapping):
        parsed = Transcription.from_dict(transcription, config.default_confidence)
    else:
        raise InvalidInputError("transcription must be a Transcription or a mapping")
    return tokens, parsed


def analyze(
    reference_text: str,
    transcription: TranscriptionInput,
    audio_duration_ms: int,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Analyze how a learner read a reference text aloud.

    Pipeline flow:
    1. Validate inputs (nothing is computed if this fails)
    2. Tokenize the reference and align it to the transcribed words
    3. Detect hesitations over the transcript alone
    4. Score articulation and fluency
    5. Extract deduplicated problem words

    Args:
        reference_text: Text the learner was asked to read
        transcription: Transcription, or the ASR dict (times in seconds)
        audio_duration_ms: Recording length in milliseconds
        config: Thresholds (defaults used when None)

    Returns:
        AnalysisResult with one match per reference token

    Raises:
        InvalidInputError: unusable reference, duration or config
        MalformedTranscriptionError: bad word timing in the transcription
    """
    config = config or DEFAULT_CONFIG
    try:
        tokens, parsed = _validate_inputs(reference_text, transcription, audio_duration_ms, config)
    except ArticulationError as e:
        logger.warning("analysis rejected (%s): %s", e.code, e)
        raise

    words = parsed.words
    matches = align_tokens(tokens, words, config)
    hesitations = detect_hesitations(words, config)
    logger.debug("%d matches, %d hesitations", len(matches), len(hesitations))

    a_score = articulation_score(matches)
    f_score = fluency_score(words, hesitations)
    problem_words = extract_problem_words(matches, hesitations, reference_text)

    result = AnalysisResult(
        articulation_score=a_score,
        fluency_score=f_score,
        overall_score=overall_score(a_score, f_score),
        matches=tuple(matches),
        hesitations=tuple(hesitations),
        problem_words=tuple(problem_words),
        words_expected=len(tokens),
        words_spoken=len(words),
        accuracy=accuracy(matches, len(tokens)),
        breakdown=articulation_breakdown(matches, hesitations, words),
    )
    logger.info(
        "analysis done: overall=%d articulation=%d fluency=%d accuracy=%d%% "
        "(%d expected, %d spoken, %d problem words)",
        result.overall_score, result.articulation_score, result.fluency_score,
        result.accuracy, result.words_expected, result.words_spoken,
        len(result.problem_words),
    )
    return result


def analyze_simple(
    reference_text: str,
    words: Sequence[Dict[str, Any]],
    audio_duration_ms: int,
) -> AnalysisResult:
    """Simplified interface taking a bare ASR word list and default config.

    Args:
        reference_text: Text the learner was asked to read
        words: ``[{word, start, end, confidence?}]`` with times in seconds
        audio_duration_ms: Recording length in milliseconds

    Returns:
        AnalysisResult (same as ``analyze``)
    """
    word_list: List[Dict[str, Any]] = list(words)
    text = " ".join(str(w.get("word", "")) for w in word_list if isinstance(w, Mapping))
    return analyze(reference_text, {"text": text, "words": word_list}, audio_duration_ms)
