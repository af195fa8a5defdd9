"""Data model for aligned words between reference text and transcript."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class MatchStatus(str, Enum):
    CORRECT = "correct"
    SKIPPED = "skipped"
    REPEATED = "repeated"
    MISPRONOUNCED = "mispronounced"


@dataclass(frozen=True)
class MatchRecord:
    """Outcome for one reference token.

    Attributes:
        expected_index: Position of the token in the reference
        expected_word: The normalized reference token
        spoken_word: Transcribed word matched to it (None if skipped)
        spoken_index: Position of that word in the transcript (None if skipped)
        timestamp_ms: Start of the spoken word in ms (None if skipped)
        status: Match classification
        confidence: ASR confidence of the spoken word (0 if skipped)
        low_confidence: Correct, but below the configured minimum confidence
    """
    expected_index: int
    expected_word: str
    status: MatchStatus
    confidence: float = 0.0
    spoken_word: Optional[str] = None
    spoken_index: Optional[int] = None
    timestamp_ms: Optional[float] = None
    low_confidence: bool = False

    @property
    def is_spoken(self) -> bool:
        return self.spoken_word is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "expectedIndex": self.expected_index,
            "expectedWord": self.expected_word,
            "spokenWord": self.spoken_word,
            "spokenIndex": self.spoken_index,
            "timestamp": self.timestamp_ms,
            "status": self.status.value,
            "confidence": self.confidence,
            "lowConfidence": self.low_confidence,
        }
