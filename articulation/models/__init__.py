"""Data models shared by the alignment, pause and scoring stages."""
from .hesitation import HesitationEvent, HesitationKind
from .match import MatchRecord, MatchStatus
from .result import AnalysisResult, ArticulationBreakdown, IssueType, ProblemWord
from .transcription import TranscribedWord, Transcription

__all__ = [
    "AnalysisResult",
    "ArticulationBreakdown",
    "HesitationEvent",
    "HesitationKind",
    "IssueType",
    "MatchRecord",
    "MatchStatus",
    "ProblemWord",
    "TranscribedWord",
    "Transcription",
]
