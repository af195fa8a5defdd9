"""Problem-word extraction from alignment and hesitation results."""
from __future__ import annotations

import re
from typing import Dict, List, Sequence, Set, Tuple

from articulation.alignment.tokenizer import tokenize_reference
from articulation.models.hesitation import HesitationEvent, HesitationKind
from articulation.models.match import MatchRecord, MatchStatus
from articulation.models.result import IssueType, ProblemWord
from articulation.scorer.numeric import round_half_up

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

SUGGESTION_TEMPLATES: Dict[IssueType, str] = {
    IssueType.SKIPPED: 'Try practicing "{word}" slowly before reading the full passage.',
    IssueType.HESITATED: 'Build confidence with "{word}" by saying it several times clearly.',
    IssueType.MISPRONOUNCED: 'Focus on each syllable in "{word}" - break it down if needed.',
    IssueType.REPEATED: 'When you say "{word}" correctly, trust yourself and move on.',
}

_HESITATION_ISSUES = {
    HesitationKind.REPEATED_WORD: IssueType.REPEATED,
    HesitationKind.FILLER_WORD: IssueType.HESITATED,
}


def generate_suggestion(word: str, issue_type: IssueType) -> str:
    template = SUGGESTION_TEMPLATES.get(issue_type, 'Practice "{word}" to improve clarity.')
    return template.format(word=word)


def sentence_context(text: str, word_index: int) -> str:
    """Sentence of ``text`` containing the token at ``word_index``.

    Sentences are split on runs of ``.``, ``!`` and ``?``. Falls back to the
    first sentence (or the whole text) when the index is out of range.
    """
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]
    seen = 0
    for sentence in sentences:
        count = len(tokenize_reference(sentence))
        if seen + count > word_index:
            return sentence.strip()
        seen += count
    return sentences[0].strip() if sentences else text


def extract_problem_words(
    matches: Sequence[MatchRecord],
    hesitations: Sequence[HesitationEvent],
    reference_text: str,
) -> List[ProblemWord]:
    """Words needing practice, deduplicated by ``(word, issue_type)``.

    Non-correct matches come first, then word-level hesitations (long
    pauses carry no word and are ignored). The first occurrence of each
    ``(word, issue_type)`` pair wins.

    Args:
        matches: Aligner output
        hesitations: Hesitation detector output
        reference_text: Original (un-normalized) reference text

    Returns:
        List of ProblemWord in generation order
    """
    candidates: List[ProblemWord] = []

    for match in matches:
        if match.status is MatchStatus.CORRECT:
            continue
        issue = IssueType(match.status.value)
        candidates.append(
            ProblemWord(
                word=match.expected_word,
                issue_type=issue,
                timestamp_ms=round_half_up(match.timestamp_ms or 0.0),
                context=sentence_context(reference_text, match.expected_index),
                suggestion=generate_suggestion(match.expected_word, issue),
            )
        )

    for event in hesitations:
        issue = _HESITATION_ISSUES.get(event.kind)
        if issue is None or not event.word:
            continue
        candidates.append(
            ProblemWord(
                word=event.word,
                issue_type=issue,
                timestamp_ms=round_half_up(event.timestamp_ms),
                context=event.context,
                suggestion=generate_suggestion(event.word, issue),
            )
        )

    seen: Set[Tuple[str, IssueType]] = set()
    problems: List[ProblemWord] = []
    for p in candidates:
        key = (p.word, p.issue_type)
        if key in seen:
            continue
        seen.add(key)
        problems.append(p)
    return problems
