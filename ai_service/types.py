"""Shared type definitions for the AI service."""
from typing import Dict, Literal

from pydantic import BaseModel, Field

from llm_gateway import CompletionOptions

Task = Literal["topic_question", "interview_question", "answer", "evaluation", "modification"]


class Evaluation(BaseModel):
    score: int = Field(ge=0, le=100)
    feedback: str


TASK_OPTIONS: Dict[str, CompletionOptions] = {
    "topic_question": CompletionOptions(temperature=0.8, max_tokens=200),
    "interview_question": CompletionOptions(temperature=0.8, max_tokens=200),
    "answer": CompletionOptions(temperature=0.7, max_tokens=500),
    "evaluation": CompletionOptions(temperature=0.3, max_tokens=300),
    "modification": CompletionOptions(temperature=0.7, max_tokens=500),
}
