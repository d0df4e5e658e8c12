from ai_service.fallbacks import (
    FEEDBACK_HIGH,
    FEEDBACK_LOW,
    FEEDBACK_MID,
    fallback_answer,
    fallback_modification,
    fallback_topic_question,
    rule_based_evaluate,
)


def _words(n: int) -> str:
    return " ".join(f"w{i}" for i in range(n))


def test_short_answer_gets_lowest_tier():
    result = rule_based_evaluate("one two three")
    assert result.score == 30
    assert result.feedback == FEEDBACK_LOW


def test_word_count_thresholds():
    assert rule_based_evaluate(_words(10)).score == 30
    assert rule_based_evaluate(_words(11)).score == 50
    assert rule_based_evaluate(_words(30)).score == 50
    assert rule_based_evaluate(_words(31)).score == 70


def test_feedback_tiers_follow_score():
    assert rule_based_evaluate(_words(11)).feedback == FEEDBACK_MID
    assert rule_based_evaluate(_words(40)).feedback == FEEDBACK_HIGH


def test_surrounding_whitespace_is_ignored():
    padded = "\n\t  " + _words(11) + "   \n"
    assert rule_based_evaluate(padded).score == 50
    assert rule_based_evaluate("   ").score == 30


def test_evaluation_is_deterministic():
    answer = _words(25)
    first = rule_based_evaluate(answer)
    rule_based_evaluate(_words(50))
    assert rule_based_evaluate(answer) == first


def test_canned_texts():
    assert "Kubernetes" in fallback_topic_question("Kubernetes")
    assert fallback_answer().startswith("This is a good question.")
    assert fallback_modification("Original.") == "Original.\n\n(Modified based on your request)"
