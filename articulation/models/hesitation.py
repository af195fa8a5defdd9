"""Data model for hesitation events found in the transcript."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class HesitationKind(str, Enum):
    LONG_PAUSE = "long_pause"
    REPEATED_WORD = "repeated_word"
    FILLER_WORD = "filler_word"


@dataclass(frozen=True)
class HesitationEvent:
    """A pause, filler or immediate repeat in the transcript.

    Attributes:
        timestamp_ms: Where the event happens (ms)
        duration_ms: Length of the pause, or of the offending word (ms)
        kind: Event type
        word: The word involved (None for long pauses)
        context: Surrounding transcript words joined by spaces
    """
    timestamp_ms: float
    duration_ms: float
    kind: HesitationKind
    context: str
    word: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp_ms,
            "duration": self.duration_ms,
            "type": self.kind.value,
            "word": self.word,
            "context": self.context,
        }
