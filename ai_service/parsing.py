"""Extraction of structured evaluations from free-text completions."""
from __future__ import annotations

import re

from .types import Evaluation

DEFAULT_SCORE = 50
DEFAULT_FEEDBACK = "Good effort! Keep practicing."

_SCORE_RE = re.compile(r"Score:\s*(\d+)", re.IGNORECASE)
_FEEDBACK_RE = re.compile(r"Feedback:\s*(.+)", re.IGNORECASE | re.DOTALL)


def clamp_score(value: int) -> int:
    return min(100, max(0, value))


def _to_int(digits: str) -> int:
    # More than three significant digits is above 100 whatever they are.
    digits = digits.lstrip("0") or "0"
    return 101 if len(digits) > 3 else int(digits)


def parse_evaluation(text: str) -> Evaluation:
    """Read ``Score:`` and ``Feedback:`` markers out of ``text``.

    Missing markers fall back to ``DEFAULT_SCORE`` and ``DEFAULT_FEEDBACK``;
    a present but empty feedback section stays empty. The score is clamped
    to 0..100. Never raises.
    """

    score_match = _SCORE_RE.search(text or "")
    feedback_match = _FEEDBACK_RE.search(text or "")

    score = _to_int(score_match.group(1)) if score_match else DEFAULT_SCORE
    feedback = feedback_match.group(1).strip() if feedback_match else DEFAULT_FEEDBACK
    return Evaluation(score=clamp_score(score), feedback=feedback)


__all__ = ["DEFAULT_FEEDBACK", "DEFAULT_SCORE", "clamp_score", "parse_evaluation"]
