from __future__ import annotations  # AI service facade composing prompts, completion and fallbacks

import logging
from functools import lru_cache
from typing import Optional, Protocol, Sequence

from config import route_from_settings, settings
from llm_gateway import CompletionClient, CompletionOptions, CompletionUnavailable
from observability import span

from .fallbacks import (
    fallback_answer,
    fallback_interview_question,
    fallback_modification,
    fallback_topic_question,
    rule_based_evaluate,
)
from .parsing import parse_evaluation
from .prompts import build_prompt
from .types import TASK_OPTIONS, Evaluation


logger = logging.getLogger(__name__)


class Completer(Protocol):  # Anything that turns a prompt into text or raises CompletionUnavailable
    def complete(self, prompt: str, options: Optional[CompletionOptions] = None) -> str: ...


class AIService:  # Total operations over a best-effort completion endpoint
    def __init__(self, client: Completer) -> None:
        self._client = client

    def generate_topic_question(self, topic: str, previous_questions: Sequence[str] = ()) -> str:
        prompt = build_prompt("topic_question", topic=topic, previous_questions=list(previous_questions))
        text = self._attempt("topic_question", prompt)
        return text if text is not None else fallback_topic_question(topic)

    def generate_interview_question(self, role: str, difficulty: str, previous_questions: Sequence[str] = ()) -> str:
        prompt = build_prompt(
            "interview_question",
            role=role,
            difficulty=difficulty,
            previous_questions=list(previous_questions),
        )
        text = self._attempt("interview_question", prompt)
        return text if text is not None else fallback_interview_question(role, difficulty)

    def answer_question(self, question: str, topic: str) -> str:
        text = self._attempt("answer", build_prompt("answer", question=question, topic=topic))
        return text if text is not None else fallback_answer()

    def evaluate_answer(self, question: str, answer: str) -> Evaluation:
        text = self._attempt("evaluation", build_prompt("evaluation", question=question, answer=answer))
        if text is None:
            return rule_based_evaluate(answer)
        return parse_evaluation(text)

    def modify_answer(self, original_answer: str, instruction: str) -> str:
        prompt = build_prompt("modification", original_answer=original_answer, instruction=instruction)
        text = self._attempt("modification", prompt)
        return text if text is not None else fallback_modification(original_answer)

    def _attempt(self, task: str, prompt: str) -> Optional[str]:  # Completion text, or None when the fallback applies
        try:
            with span(f"ai.{task}"):
                raw = self._client.complete(prompt, TASK_OPTIONS[task])
        except CompletionUnavailable as exc:
            logger.warning("Completion unavailable for task=%s, using fallback: %s", task, exc)
            return None
        return raw.strip()


@lru_cache(maxsize=1)
def get_ai_service() -> AIService:  # Process-wide service bound to the configured endpoint
    return AIService(CompletionClient(route_from_settings(settings)))


__all__ = ["AIService", "Completer", "get_ai_service"]
