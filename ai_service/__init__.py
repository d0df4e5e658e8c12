"""Prompt construction, completion parsing and fallbacks for the interview coach."""
from .fallbacks import rule_based_evaluate
from .parsing import parse_evaluation
from .prompts import build_prompt
from .service import AIService, get_ai_service
from .types import Evaluation

__all__ = [
    "AIService",
    "Evaluation",
    "build_prompt",
    "get_ai_service",
    "parse_evaluation",
    "rule_based_evaluate",
]
