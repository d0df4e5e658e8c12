"""Prompt builders for each completion task."""
from __future__ import annotations

from textwrap import dedent
from typing import Any, Callable, Dict, Sequence


def _previous_block(previous_questions: Sequence[str]) -> str:
    if not previous_questions:
        return ""
    listed = "\n".join(previous_questions)
    return f"Previously asked questions:\n{listed}\n\nMake sure to ask something different."


def build_topic_question_prompt(topic: str, previous_questions: Sequence[str] = ()) -> str:
    """Prompt for a single scenario-based question about ``topic``."""

    return dedent(
        """\
        You are an experienced technical interviewer. Generate ONE challenging interview question about: {topic}

        {previous}

        Requirements:
        - Make it practical and scenario-based
        - Suitable for a technical interview
        - Clear and concise
        - Return ONLY the question, no explanations

        Question:"""
    ).format(topic=topic, previous=_previous_block(previous_questions))


def build_interview_question_prompt(role: str, difficulty: str, previous_questions: Sequence[str] = ()) -> str:
    """Prompt for the next question of a role-based mock interview."""

    return dedent(
        """\
        You are an experienced interviewer hiring for the role: {role}
        Difficulty level: {difficulty}

        Generate ONE interview question for this candidate.

        {previous}

        Requirements:
        - Match the difficulty level
        - Mix technical depth with real-world scenarios
        - Clear and concise
        - Return ONLY the question, no explanations

        Question:"""
    ).format(role=role, difficulty=difficulty, previous=_previous_block(previous_questions))


def build_answer_prompt(question: str, topic: str) -> str:
    return dedent(
        """\
        You are an expert interviewer and educator.

        Topic: {topic}
        Question: {question}

        Provide a comprehensive answer that:
        1. Explains clearly
        2. Includes examples
        3. Mentions best practices
        4. Covers pitfalls
        5. Is structured

        Answer:"""
    ).format(topic=topic, question=question)


def build_evaluation_prompt(question: str, answer: str) -> str:
    return dedent(
        """\
        Evaluate this answer.

        Question: {question}
        Answer: {answer}

        Provide:
        Score: [0-100]
        Feedback: [2-3 sentences constructive feedback]"""
    ).format(question=question, answer=answer)


def build_modification_prompt(original_answer: str, instruction: str) -> str:
    return dedent(
        """\
        Modify the following answer based on the user's instruction.

        Original Answer:
        {original}

        Instruction:
        {instruction}

        Modified Answer:"""
    ).format(original=original_answer, instruction=instruction)


_BUILDERS: Dict[str, Callable[..., str]] = {
    "topic_question": build_topic_question_prompt,
    "interview_question": build_interview_question_prompt,
    "answer": build_answer_prompt,
    "evaluation": build_evaluation_prompt,
    "modification": build_modification_prompt,
}


def build_prompt(task: str, **params: Any) -> str:
    """Dispatch to the builder registered for ``task``.

    Raises:
        ValueError: If ``task`` has no builder.
    """

    builder = _BUILDERS.get(task)
    if builder is None:
        raise ValueError(f"Unknown prompt task: {task}")
    return builder(**params)


__all__ = [
    "build_prompt",
    "build_topic_question_prompt",
    "build_interview_question_prompt",
    "build_answer_prompt",
    "build_evaluation_prompt",
    "build_modification_prompt",
]
