"""Articulation and fluency scoring."""
from .articulation import accuracy, articulation_score
from .breakdown import articulation_breakdown
from .fluency import fluency_score, overall_score

__all__ = [
    "accuracy",
    "articulation_breakdown",
    "articulation_score",
    "fluency_score",
    "overall_score",
]
