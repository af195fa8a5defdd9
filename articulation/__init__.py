"""Reading-articulation alignment and scoring engine."""
from .config import AnalysisConfig
from .errors import ArticulationError, InvalidInputError, MalformedTranscriptionError
from .feedback import ReadingFeedback, generate_feedback
from .models import (
    AnalysisResult,
    HesitationEvent,
    HesitationKind,
    IssueType,
    MatchRecord,
    MatchStatus,
    ProblemWord,
    TranscribedWord,
    Transcription,
)
from .pipeline import analyze, analyze_simple

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "ArticulationError",
    "HesitationEvent",
    "HesitationKind",
    "InvalidInputError",
    "IssueType",
    "MalformedTranscriptionError",
    "MatchRecord",
    "MatchStatus",
    "ProblemWord",
    "ReadingFeedback",
    "TranscribedWord",
    "Transcription",
    "analyze",
    "analyze_simple",
    "generate_feedback",
]
