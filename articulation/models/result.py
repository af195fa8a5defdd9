"""Output records of an analysis run."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from .hesitation import HesitationEvent
from .match import MatchRecord


class IssueType(str, Enum):
    SKIPPED = "skipped"
    HESITATED = "hesitated"
    MISPRONOUNCED = "mispronounced"
    REPEATED = "repeated"


@dataclass(frozen=True)
class ProblemWord:
    """A word the learner should practice, with where and why."""
    word: str
    issue_type: IssueType
    timestamp_ms: int
    context: str
    suggestion: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "issueType": self.issue_type.value,
            "timestamp": self.timestamp_ms,
            "context": self.context,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class ArticulationBreakdown:
    """Per-aspect metrics behind the headline scores (0-100 unless noted)."""
    word_clarity: int = 0
    syllable_completion: int = 0
    pause_placement: int = 0
    word_boundaries: int = 0
    hesitation_count: int = 0
    average_pause_ms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wordClarity": self.word_clarity,
            "syllableCompletion": self.syllable_completion,
            "pausePlacement": self.pause_placement,
            "wordBoundaries": self.word_boundaries,
            "hesitationCount": self.hesitation_count,
            "averagePauseDuration": self.average_pause_ms,
        }


@dataclass(frozen=True)
class AnalysisResult:
    articulation_score: int
    fluency_score: int
    overall_score: int
    matches: Tuple[MatchRecord, ...]
    hesitations: Tuple[HesitationEvent, ...]
    problem_words: Tuple[ProblemWord, ...]
    words_expected: int
    words_spoken: int
    accuracy: int
    breakdown: ArticulationBreakdown = field(default_factory=ArticulationBreakdown)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable form with camelCase keys."""
        return {
            "articulationScore": self.articulation_score,
            "fluencyScore": self.fluency_score,
            "overallScore": self.overall_score,
            "matches": [m.to_dict() for m in self.matches],
            "hesitations": [h.to_dict() for h in self.hesitations],
            "problemWords": [p.to_dict() for p in self.problem_words],
            "wordsExpected": self.words_expected,
            "wordsSpoken": self.words_spoken,
            "accuracy": self.accuracy,
            "analysis": self.breakdown.to_dict(),
        }
