"""Encouraging, learner-facing feedback built from an analysis result.

Stateless lookup over the aggregate classifications; it never looks at
the alignment internals and can run after the result has been stored.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from articulation.models.result import AnalysisResult, IssueType, ProblemWord
from articulation.scorer.numeric import round_half_up

MAX_PRACTICE_WORDS = 5


@dataclass(frozen=True)
class ReadingFeedback:
    summary: str
    encouragement: str
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    next_steps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "encouragement": self.encouragement,
            "nextSteps": list(self.next_steps),
        }


def completion_rate(words_spoken: int, words_expected: int) -> int:
    """Spoken words as a percentage of expected words (may exceed 100)."""
    if words_expected <= 0:
        return 0
    return round_half_up(words_spoken / words_expected * 100.0)


def summary_message(rate: int, articulation: int, fluency: int) -> str:
    if rate >= 95 and articulation >= 85:
        return f"Excellent work! You read {rate}% of words clearly with great articulation."
    if rate >= 80 and articulation >= 70:
        return f"Great progress! You read {rate}% of words clearly."
    if rate >= 60:
        return f"Good effort! You read {rate}% of words. Keep practicing!"
    return "Nice try! You're building your reading skills. Keep going!"


def strengths_for(articulation: int, fluency: int, rate: int) -> List[str]:
    strengths: List[str] = []
    if articulation >= 80:
        strengths.append("Clear word pronunciation")
    if fluency >= 80:
        strengths.append("Smooth, natural flow")
    if rate >= 90:
        strengths.append("High word completion rate")
    if articulation >= 70 and fluency >= 70:
        strengths.append("Good balance of clarity and pace")

    # Always have at least one strength
    if not strengths:
        strengths.append("Willingness to practice and improve")
    return strengths


def improvements_for(
    articulation: int, fluency: int, problem_words: Sequence[ProblemWord]
) -> List[str]:
    improvements: List[str] = []
    if articulation < 70:
        improvements.append("Focus on pronouncing each word completely")
    if fluency < 70:
        improvements.append("Try to maintain a steady, consistent pace")

    skipped = sum(1 for p in problem_words if p.issue_type is IssueType.SKIPPED)
    if skipped > 3:
        improvements.append("Take your time - don't skip words")

    hesitated = sum(1 for p in problem_words if p.issue_type is IssueType.HESITATED)
    if hesitated > 5:
        improvements.append("Practice challenging words beforehand to build confidence")
    return improvements


def encouragement_for(articulation: int, fluency: int) -> str:
    overall = (articulation + fluency) / 2
    if overall >= 85:
        return ("You're doing fantastic! Your reading skills are really strong. "
                "Keep up the excellent work!")
    if overall >= 70:
        return ("You're making great progress! Every practice session makes you "
                "stronger. Keep it up!")
    if overall >= 50:
        return ("You're on the right track! Remember, improvement comes with practice. "
                "You've got this!")
    return ("Every expert was once a beginner. You're building important skills "
            "with each practice session!")


def next_steps_for(
    problem_words: Sequence[ProblemWord], articulation: int, fluency: int
) -> List[str]:
    steps: List[str] = []

    # Unique words, first-seen order
    practice = list(dict.fromkeys(p.word for p in problem_words))[:MAX_PRACTICE_WORDS]
    if practice:
        steps.append(f"Practice these words: {', '.join(practice)}")
    if articulation < 70:
        steps.append("Practice reading slowly and clearly, focusing on each word")
    if fluency < 70:
        steps.append("Try reading the same passage multiple times to build fluency")

    if not steps:
        steps.append("Continue practicing regularly to maintain your excellent progress")
    return steps


def generate_feedback(result: AnalysisResult) -> ReadingFeedback:
    """Build encouraging feedback from scores, counts and problem words.

    Args:
        result: Output of ``articulation.analyze``

    Returns:
        ReadingFeedback with summary, strengths, improvements,
        encouragement and next steps
    """
    articulation = result.articulation_score
    fluency = result.fluency_score
    rate = completion_rate(result.words_spoken, result.words_expected)

    return ReadingFeedback(
        summary=summary_message(rate, articulation, fluency),
        encouragement=encouragement_for(articulation, fluency),
        strengths=strengths_for(articulation, fluency, rate),
        improvements=improvements_for(articulation, fluency, result.problem_words),
        next_steps=next_steps_for(result.problem_words, articulation, fluency),
    )
