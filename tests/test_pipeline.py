import json

import pytest

from articulation import (
    AnalysisConfig,
    HesitationKind,
    InvalidInputError,
    IssueType,
    MalformedTranscriptionError,
    MatchStatus,
    TranscribedWord,
    Transcription,
    analyze,
    analyze_simple,
)
from tests._helpers import asr_words, transcription

FOX = "The quick brown fox jumps over the lazy dog"


def _word(text: str, start: float, end: float, **extra):
    return {"word": text, "start": start, "end": end, **extra}


class TestScenarios:
    def test_perfect_reading(self) -> None:
        spoken = FOX.lower().split()
        result = analyze(FOX, transcription(spoken), 2000)

        assert result.articulation_score == 100
        assert result.fluency_score == 100
        assert result.overall_score == 100
        assert result.accuracy == 100
        assert result.words_expected == 9
        assert result.words_spoken == 9
        assert result.problem_words == ()
        assert result.hesitations == ()
        assert all(m.status is MatchStatus.CORRECT for m in result.matches)

    def test_one_skipped_word(self) -> None:
        result = analyze(
            "Hello world how are you", transcription(["hello", "how", "are", "you"]), 2000
        )

        assert result.accuracy == 80
        assert [m.status for m in result.matches].count(MatchStatus.SKIPPED) == 1
        # 0.4 * 80 + 0.3 * 80 + 0.3 * 100
        assert result.articulation_score == 86
        assert result.fluency_score == 100
        assert result.overall_score == 92

        assert len(result.problem_words) == 1
        problem = result.problem_words[0]
        assert problem.word == "world"
        assert problem.issue_type is IssueType.SKIPPED
        assert problem.context == "Hello world how are you"

    def test_nothing_spoken(self) -> None:
        result = analyze("Read this aloud", {"text": "", "words": []}, 3000)

        assert [m.status for m in result.matches] == [MatchStatus.SKIPPED] * 3
        assert result.words_spoken == 0
        assert result.accuracy == 0
        assert result.fluency_score == 0
        assert result.articulation_score == 27
        assert result.overall_score == 16

    def test_filler_and_long_pause(self) -> None:
        words = [
            _word("the", 0.0, 0.3),
            _word("um", 0.4, 0.7),
            _word("cat", 0.8, 1.1),
            _word("sat", 1.2, 1.5),
            _word("on", 3.5, 3.8),
            _word("the", 3.9, 4.2),
            _word("mat", 4.3, 4.6),
        ]
        result = analyze("The cat sat on the mat.", {"text": "", "words": words}, 5000)

        assert all(m.status is MatchStatus.CORRECT for m in result.matches)
        kinds = [h.kind for h in result.hesitations]
        assert kinds == [HesitationKind.LONG_PAUSE, HesitationKind.FILLER_WORD]
        assert result.hesitations[0].duration_ms == pytest.approx(2000.0)
        assert result.hesitations[0].timestamp_ms == pytest.approx(1500.0)
        assert [(p.word, p.issue_type) for p in result.problem_words] == [
            ("um", IssueType.HESITATED)
        ]
        assert result.breakdown.hesitation_count == 2
        assert result.fluency_score < 100

    def test_invariants_on_a_messy_reading(self) -> None:
        text = "Peter Piper picked a peck of pickled peppers. Where is the peck?"
        spoken = ["peter", "uh", "piper", "piper", "picked", "a", "pack", "of",
                  "pickle", "peppers", "where", "the", "peck", "peck"]
        result = analyze(text, transcription(spoken, gap_s=0.1, confidence=0.85), 8000)

        assert len(result.matches) == result.words_expected == 12
        assert [m.expected_index for m in result.matches] == list(range(12))
        for score in (result.articulation_score, result.fluency_score,
                      result.overall_score, result.accuracy):
            assert 0 <= score <= 100
        keys = [(p.word, p.issue_type) for p in result.problem_words]
        assert len(keys) == len(set(keys))

        spoken_indices = [m.spoken_index for m in result.matches if m.spoken_index is not None]
        assert spoken_indices == sorted(set(spoken_indices))


class TestValidation:
    @pytest.mark.parametrize("reference", ["", "   ", "...", None])
    def test_unusable_reference(self, reference) -> None:
        with pytest.raises(InvalidInputError):
            analyze(reference, transcription(["a"]), 1000)

    @pytest.mark.parametrize("duration", [0, -5, None, "1000", True])
    def test_bad_duration(self, duration) -> None:
        with pytest.raises(InvalidInputError):
            analyze("a", transcription(["a"]), duration)

    def test_missing_word_list(self) -> None:
        with pytest.raises(InvalidInputError):
            analyze("a", {"text": "a", "language": "en"}, 1000)

    def test_not_a_transcription(self) -> None:
        with pytest.raises(InvalidInputError):
            analyze("a", ["a"], 1000)

    def test_missing_start(self) -> None:
        words = [_word("a", 0.0, 0.5), {"word": "b", "end": 1.0}]
        with pytest.raises(MalformedTranscriptionError) as exc:
            analyze("a b", {"words": words}, 1000)
        assert exc.value.word_index == 1

    def test_end_before_start(self) -> None:
        with pytest.raises(MalformedTranscriptionError):
            analyze("a", {"words": [_word("a", 1.0, 0.5)]}, 1000)

    def test_overlapping_words(self) -> None:
        words = [_word("a", 0.0, 0.6), _word("b", 0.5, 1.0)]
        with pytest.raises(MalformedTranscriptionError) as exc:
            analyze("a b", {"words": words}, 1000)
        assert exc.value.word_index == 1

    @pytest.mark.parametrize("confidence", [1.5, -0.1, "high"])
    def test_confidence_out_of_range(self, confidence) -> None:
        words = [_word("a", 0.0, 0.5, confidence=confidence)]
        with pytest.raises(MalformedTranscriptionError):
            analyze("a", {"words": words}, 1000)

    def test_negative_time(self) -> None:
        with pytest.raises(MalformedTranscriptionError):
            analyze("a", {"words": [_word("a", -0.1, 0.5)]}, 1000)

    def test_invalid_config(self) -> None:
        with pytest.raises(InvalidInputError):
            analyze("a", transcription(["a"]), 1000, AnalysisConfig(min_confidence=2.0))

    def test_overlapping_transcription_object(self) -> None:
        words = (
            TranscribedWord(text="a", start_ms=0, end_ms=600),
            TranscribedWord(text="b", start_ms=500, end_ms=900),
        )
        with pytest.raises(MalformedTranscriptionError):
            analyze("a b", Transcription(words=words), 1000)

    @pytest.mark.parametrize(
        "word",
        [
            TranscribedWord(text="a", start_ms=500, end_ms=100, confidence=1.0),
            TranscribedWord(text="a", start_ms=float("nan"), end_ms=100, confidence=1.0),
            TranscribedWord(text="a", start_ms=-10, end_ms=100, confidence=1.0),
            TranscribedWord(text="a", start_ms=0, end_ms=float("inf"), confidence=1.0),
            TranscribedWord(text="a", start_ms=0, end_ms=100, confidence=1.5),
        ],
    )
    def test_bad_word_in_transcription_object(self, word) -> None:
        with pytest.raises(MalformedTranscriptionError) as exc:
            analyze("a", Transcription(words=(word,)), 1000)
        assert exc.value.word_index == 0


class TestTranscriptionInput:
    def test_seconds_become_milliseconds(self) -> None:
        parsed = Transcription.from_dict(
            {"words": [_word("a", 1.5, 2.0)], "language": "en", "duration": 2.5}
        )
        assert parsed.words[0].start_ms == pytest.approx(1500.0)
        assert parsed.words[0].end_ms == pytest.approx(2000.0)
        assert parsed.duration_ms == pytest.approx(2500.0)
        assert parsed.language == "en"

    def test_missing_confidence_defaults(self) -> None:
        data = transcription(["a", "b"], confidence=None)
        parsed = Transcription.from_dict(data)
        assert [w.confidence for w in parsed.words] == [0.9, 0.9]

        result = analyze("a b", data, 1000)
        # 0.4 * 100 + 0.3 * 100 + 0.3 * 90
        assert result.articulation_score == 97

    def test_segments_fallback(self) -> None:
        data = {
            "text": "one two three",
            "segments": [
                {"text": "one two", "words": [_word("one", 0.0, 0.4), _word("two", 0.4, 0.8)]},
                {"text": "three", "words": [_word("three", 0.9, 1.3)]},
            ],
        }
        result = analyze("One two three", data, 1500)
        assert result.words_spoken == 3
        assert result.accuracy == 100

    def test_empty_words_fall_back_to_segments(self) -> None:
        data = {"words": [], "segments": [{"words": [_word("one", 0.0, 0.4)]}]}
        result = analyze("one", data, 1000)
        assert result.words_spoken == 1
        assert result.accuracy == 100

    def test_empty_words_without_segment_words(self) -> None:
        data = {"words": [], "segments": [{"text": "", "words": []}]}
        result = analyze("one", data, 1000)
        assert result.words_spoken == 0
        assert result.matches[0].status is MatchStatus.SKIPPED

    def test_text_key_accepted_for_words(self) -> None:
        parsed = Transcription.from_dict({"words": [{"text": "hi", "start": 0, "end": 0.2}]})
        assert parsed.words[0].text == "hi"

    def test_transcription_object(self) -> None:
        words = tuple(
            TranscribedWord(text=t, start_ms=i * 300, end_ms=i * 300 + 250, confidence=1.0)
            for i, t in enumerate(["hello", "there"])
        )
        result = analyze("Hello there", Transcription(words=words, text="hello there"), 800)
        assert result.accuracy == 100
        assert result.matches[1].timestamp_ms == 300


class TestOutput:
    def test_config_override_changes_alignment(self) -> None:
        data = transcription(["the", "color", "red"])
        assert analyze("the colour red", data, 1500).accuracy == 100

        strict = AnalysisConfig(fuzzy_match_threshold=0)
        result = analyze("the colour red", data, 1500, strict)
        assert result.matches[1].status is MatchStatus.MISPRONOUNCED

    def test_to_dict_is_json_serializable(self) -> None:
        result = analyze(
            "Hello world how are you", transcription(["hello", "um", "how", "are", "you"]), 2000
        )
        payload = json.loads(json.dumps(result.to_dict()))

        assert set(payload) == {
            "articulationScore", "fluencyScore", "overallScore", "matches",
            "hesitations", "problemWords", "wordsExpected", "wordsSpoken",
            "accuracy", "analysis",
        }
        assert payload["matches"][1]["status"] == "skipped"
        assert payload["hesitations"][0]["type"] == "filler_word"
        assert payload["problemWords"][0]["issueType"] == "skipped"

    def test_analyze_simple(self) -> None:
        result = analyze_simple("quick brown fox", asr_words(["quick", "brown", "fox"]), 1500)
        assert result.overall_score == 100
        assert result.words_spoken == 3
