"""Tunable parameters of a single analysis run."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Mapping, Optional

from .errors import InvalidInputError
from .rules import (
    CONTEXT_RADIUS,
    DEFAULT_CONFIDENCE,
    FILLER_WORDS,
    FUZZY_MATCH_THRESHOLD,
    LONG_PAUSE_MULTIPLIER,
    MIN_CONFIDENCE,
    MIN_PAUSE_MS,
)

# Accepted camelCase aliases when a config comes from a JSON request
_ALIASES = {
    "fuzzyMatchThreshold": "fuzzy_match_threshold",
    "minConfidence": "min_confidence",
    "defaultConfidence": "default_confidence",
    "longPauseMultiplier": "long_pause_multiplier",
    "minPauseMs": "min_pause_ms",
    "fillerWords": "filler_words",
    "contextRadius": "context_radius",
}


@dataclass(frozen=True)
class AnalysisConfig:
    """Thresholds used by the aligner, hesitation detector and scorer.

    Attributes:
        fuzzy_match_threshold: Max edit distance still counted as correct
        min_confidence: Correct matches below this are flagged low confidence
        default_confidence: Confidence assumed when the ASR omits one
        long_pause_multiplier: Factor applied to the mean inter-word gap
        min_pause_ms: Floor for the long-pause threshold (milliseconds)
        filler_words: Normalized words counted as fillers
        context_radius: Words either side included in hesitation context
    """
    fuzzy_match_threshold: int = FUZZY_MATCH_THRESHOLD
    min_confidence: float = MIN_CONFIDENCE
    default_confidence: float = DEFAULT_CONFIDENCE
    long_pause_multiplier: float = LONG_PAUSE_MULTIPLIER
    min_pause_ms: float = MIN_PAUSE_MS
    filler_words: FrozenSet[str] = FILLER_WORDS
    context_radius: int = CONTEXT_RADIUS

    def validate(self) -> "AnalysisConfig":
        """Raise InvalidInputError if any value is out of range."""
        if self.fuzzy_match_threshold < 0:
            raise InvalidInputError("fuzzy_match_threshold must be >= 0")
        if not 0.0 <= self.min_confidence <= 1.0:
            raise InvalidInputError("min_confidence must be within [0, 1]")
        if not 0.0 <= self.default_confidence <= 1.0:
            raise InvalidInputError("default_confidence must be within [0, 1]")
        if self.long_pause_multiplier <= 0:
            raise InvalidInputError("long_pause_multiplier must be > 0")
        if self.min_pause_ms < 0:
            raise InvalidInputError("min_pause_ms must be >= 0")
        if self.context_radius < 0:
            raise InvalidInputError("context_radius must be >= 0")
        return self

    def replace(self, **overrides: Any) -> "AnalysisConfig":
        """Return a validated copy with some fields overridden."""
        if "filler_words" in overrides:
            fillers = overrides["filler_words"]
            if isinstance(fillers, str):
                raise InvalidInputError("filler_words must be a list of strings")
            fillers = list(fillers)
            if not all(isinstance(w, str) for w in fillers):
                raise InvalidInputError("filler_words must be a list of strings")
            overrides["filler_words"] = frozenset(w.lower().strip() for w in fillers)
        return dataclasses.replace(self, **overrides).validate()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "AnalysisConfig":
        """Build a config from a (possibly camelCase) mapping of overrides."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidInputError("config must be an object")
        known = {f.name for f in dataclasses.fields(cls)}
        overrides: Dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidInputError(f"Unknown config option: {key!r}")
            overrides[name] = value
        try:
            return cls().replace(**overrides)
        except TypeError as e:
            raise InvalidInputError(f"Invalid config value: {e}") from e


DEFAULT_CONFIG = AnalysisConfig()
