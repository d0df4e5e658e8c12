"""Deterministic substitutes used when the completion endpoint is unavailable."""
from __future__ import annotations

from .types import Evaluation

BASE_SCORE = 30
DETAIL_BONUS = 20
SHORT_WORDS = 10
LONG_WORDS = 30

FEEDBACK_HIGH = "Great answer! You covered the key points well."
FEEDBACK_MID = "Good attempt. Add more detail and examples."
FEEDBACK_LOW = "Try to elaborate more and include specific examples."

FALLBACK_ANSWER = (
    "This is a good question. Try to focus on core concepts, practical usage, "
    "best practices, and common pitfalls."
)
MODIFIED_SUFFIX = "\n\n(Modified based on your request)"


def _word_count(text: str) -> int:
    return len(text.strip().split()) if text else 0


def _feedback_for(score: int) -> str:
    if score >= 70:
        return FEEDBACK_HIGH
    if score >= 50:
        return FEEDBACK_MID
    return FEEDBACK_LOW


def rule_based_evaluate(answer: str) -> Evaluation:
    """Score an answer by length alone: 30, 50 or 70."""

    words = _word_count(answer)
    score = BASE_SCORE
    if words > SHORT_WORDS:
        score += DETAIL_BONUS
    if words > LONG_WORDS:
        score += DETAIL_BONUS
    return Evaluation(score=score, feedback=_feedback_for(score))


def fallback_topic_question(topic: str) -> str:
    return f"Explain the key concepts and best practices in {topic}. What are common challenges developers face?"


def fallback_interview_question(role: str, difficulty: str) -> str:
    return (
        f"As a {role} candidate at {difficulty} level, walk me through a challenging problem you solved. "
        "What trade-offs did you consider and what would you do differently?"
    )


def fallback_answer() -> str:
    return FALLBACK_ANSWER


def fallback_modification(original_answer: str) -> str:
    return original_answer + MODIFIED_SUFFIX


__all__ = [
    "FEEDBACK_HIGH",
    "FEEDBACK_MID",
    "FEEDBACK_LOW",
    "rule_based_evaluate",
    "fallback_topic_question",
    "fallback_interview_question",
    "fallback_answer",
    "fallback_modification",
]
