"""Transcription input model and its boundary validation.

The ASR collaborator reports times in seconds. They are converted to
milliseconds exactly once, here; everything downstream works in ms.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..errors import InvalidInputError, MalformedTranscriptionError
from ..rules import DEFAULT_CONFIDENCE


def _seconds_to_ms(value: Any, what: str, index: int) -> float:
    if value is None:
        raise MalformedTranscriptionError(f"Word {index} is missing '{what}'", index)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedTranscriptionError(
            f"Word {index} has non-numeric '{what}': {value!r}", index
        )
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise MalformedTranscriptionError(
            f"Word {index} has invalid '{what}': {value!r}", index
        )
    return float(value) * 1000.0


@dataclass(frozen=True)
class TranscribedWord:
    """One word heard by the ASR.

    Attributes:
        text: The word as transcribed (not normalized)
        start_ms: Start time in milliseconds
        end_ms: End time in milliseconds
        confidence: ASR confidence in [0, 1]
    """
    text: str
    start_ms: float
    end_ms: float
    confidence: float = DEFAULT_CONFIDENCE

    @property
    def duration_ms(self) -> float:
        return self.end_ms - self.start_ms

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        index: int = 0,
        default_confidence: float = DEFAULT_CONFIDENCE,
    ) -> "TranscribedWord":
        """Parse an ASR word entry ``{word, start, end, confidence?}`` (seconds)."""
        if not isinstance(data, Mapping):
            raise MalformedTranscriptionError(f"Word {index} is not an object", index)
        # Both "word" and "text"/"value" keys show up depending on the ASR backend
        text = data.get("word")
        if text is None:
            text = data.get("text", data.get("value"))
        if not isinstance(text, str):
            raise MalformedTranscriptionError(f"Word {index} has no text", index)

        start_ms = _seconds_to_ms(data.get("start"), "start", index)
        end_ms = _seconds_to_ms(data.get("end"), "end", index)
        if end_ms < start_ms:
            raise MalformedTranscriptionError(
                f"Word {index} ends before it starts ({data.get('end')} < {data.get('start')})",
                index,
            )

        confidence = data.get("confidence")
        if confidence is None:
            confidence = default_confidence
        elif isinstance(confidence, bool) or not isinstance(confidence, (int, float)) \
                or not 0.0 <= confidence <= 1.0:
            raise MalformedTranscriptionError(
                f"Word {index} has confidence outside [0, 1]: {confidence!r}", index
            )
        return cls(text=text, start_ms=start_ms, end_ms=end_ms, confidence=float(confidence))


def _check_word(word: TranscribedWord, index: int) -> None:
    for what, value in (("start", word.start_ms), ("end", word.end_ms)):
        if isinstance(value, bool) or not isinstance(value, (int, float)) \
                or math.isnan(value) or math.isinf(value) or value < 0:
            raise MalformedTranscriptionError(
                f"Word {index} has invalid '{what}': {value!r}", index
            )
    if word.end_ms < word.start_ms:
        raise MalformedTranscriptionError(
            f"Word {index} ends before it starts ({word.end_ms:.0f}ms < {word.start_ms:.0f}ms)",
            index,
        )
    confidence = word.confidence
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)) \
            or not 0.0 <= confidence <= 1.0:
        raise MalformedTranscriptionError(
            f"Word {index} has confidence outside [0, 1]: {confidence!r}", index
        )


def validate_words(words: Sequence[TranscribedWord]) -> None:
    """Raise if any word has bad timing or confidence, or words overlap.

    Applies to words built directly as well as ones parsed by ``from_dict``.
    """
    for k, word in enumerate(words):
        _check_word(word, k)
        if k > 0 and word.start_ms < words[k - 1].end_ms:
            raise MalformedTranscriptionError(
                f"Word {k} starts at {word.start_ms:.0f}ms, before word {k - 1} "
                f"ends at {words[k - 1].end_ms:.0f}ms",
                k,
            )


@dataclass(frozen=True)
class Transcription:
    """Time-stamped ASR output for one recording."""
    words: Tuple[TranscribedWord, ...] = field(default_factory=tuple)
    text: str = ""
    language: str = "unknown"
    duration_ms: Optional[float] = None

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        default_confidence: float = DEFAULT_CONFIDENCE,
    ) -> "Transcription":
        """Parse and validate the ASR wire format.

        Expected shape::

            {"text": str, "words": [{"word", "start", "end", "confidence"?}],
             "language": str, "duration": float}

        ``words`` falls back to the concatenated ``segments[].words`` when it
        is absent or empty. Times are seconds on the wire.

        Raises:
            InvalidInputError: no word list can be found at all
            MalformedTranscriptionError: a word has bad or unordered timing
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError("transcription must be an object")

        raw_words = data.get("words")
        if not raw_words:
            segment_words = _words_from_segments(data.get("segments"))
            if segment_words or raw_words is None:
                raw_words = segment_words
        if raw_words is None:
            raise InvalidInputError("transcription has no 'words' and no segment words")
        if not isinstance(raw_words, (list, tuple)):
            raise InvalidInputError("transcription 'words' must be a list")

        words = tuple(
            TranscribedWord.from_dict(w, i, default_confidence)
            for i, w in enumerate(raw_words)
        )
        validate_words(words)

        duration = data.get("duration", data.get("durationSeconds"))
        duration_ms = None
        if isinstance(duration, (int, float)) and not isinstance(duration, bool):
            duration_ms = float(duration) * 1000.0

        return cls(
            words=words,
            text=str(data.get("text") or ""),
            language=str(data.get("language") or "unknown"),
            duration_ms=duration_ms,
        )


def _words_from_segments(segments: Any) -> Optional[List[Any]]:
    if not isinstance(segments, (list, tuple)):
        return None
    found = False
    words: List[Any] = []
    for seg in segments:
        if isinstance(seg, Mapping) and isinstance(seg.get("words"), (list, tuple)):
            found = True
            words.extend(seg["words"])
    return words if found else None
