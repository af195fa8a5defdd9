"""Exceptions raised by the articulation engine.

Every failure is raised before alignment starts; callers never receive a
partial result.
"""
from __future__ import annotations

from typing import Optional


class ArticulationError(Exception):
    """Base class for all engine errors."""

    code = "articulation_error"


class InvalidInputError(ArticulationError, ValueError):
    """Reference text, transcription, duration or config is unusable."""

    code = "invalid_input"


class MalformedTranscriptionError(ArticulationError, ValueError):
    """A transcribed word has missing or inconsistent timing data."""

    code = "malformed_transcription"

    def __init__(self, message: str, word_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.word_index = word_index
