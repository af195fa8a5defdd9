from articulation import analyze, generate_feedback
from articulation.feedback import completion_rate, encouragement_for, summary_message
from tests._helpers import transcription

FOX = "The quick brown fox jumps over the lazy dog"


def test_completion_rate() -> None:
    assert completion_rate(9, 10) == 90
    assert completion_rate(12, 10) == 120
    assert completion_rate(3, 0) == 0


def test_summary_tiers() -> None:
    assert summary_message(100, 90, 90).startswith("Excellent work! You read 100%")
    assert summary_message(85, 75, 50).startswith("Great progress!")
    assert summary_message(65, 40, 40).startswith("Good effort! You read 65%")
    assert summary_message(20, 90, 90).startswith("Nice try!")


def test_encouragement_uses_average_score() -> None:
    assert encouragement_for(90, 80).startswith("You're doing fantastic!")
    assert encouragement_for(80, 60).startswith("You're making great progress!")
    assert encouragement_for(50, 50).startswith("You're on the right track!")
    assert encouragement_for(20, 0).startswith("Every expert was once a beginner.")


def test_feedback_for_a_perfect_reading() -> None:
    result = analyze(FOX, transcription(FOX.lower().split()), 2000)
    feedback = generate_feedback(result)

    assert feedback.summary == (
        "Excellent work! You read 100% of words clearly with great articulation."
    )
    assert feedback.strengths == [
        "Clear word pronunciation",
        "Smooth, natural flow",
        "High word completion rate",
        "Good balance of clarity and pace",
    ]
    assert feedback.improvements == []
    assert feedback.next_steps == [
        "Continue practicing regularly to maintain your excellent progress"
    ]


def test_feedback_when_nothing_was_read() -> None:
    result = analyze("one two three four five six", {"words": []}, 3000)
    feedback = generate_feedback(result)

    assert feedback.summary.startswith("Nice try!")
    assert feedback.strengths == ["Willingness to practice and improve"]
    assert "Take your time - don't skip words" in feedback.improvements
    assert "Try to maintain a steady, consistent pace" in feedback.improvements
    # Practice list is capped
    assert feedback.next_steps[0] == "Practice these words: one, two, three, four, five"
    assert len(feedback.next_steps) == 3


def test_to_dict_keys() -> None:
    result = analyze(FOX, transcription(FOX.lower().split()), 2000)
    payload = generate_feedback(result).to_dict()
    assert set(payload) == {"summary", "strengths", "improvements", "encouragement", "nextSteps"}
