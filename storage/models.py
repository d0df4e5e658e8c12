"""Document models for interviews and practice sessions."""
from __future__ import annotations

import datetime as dt
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

InterviewStatus = Literal["in-progress", "completed"]
PracticeMode = Literal["ai-answers", "user-answers"]


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class Document(BaseModel):
    """Base for stored documents; serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuestionAnswerRecord(Document):
    question: str
    user_answer: str
    score: int = Field(ge=0, le=100)
    feedback: str
    timestamp: dt.datetime = Field(default_factory=utc_now)


class Interview(Document):
    interview_id: str
    user_id: str
    role: str
    difficulty: str
    questions: List[QuestionAnswerRecord] = Field(default_factory=list)
    total_score: int = 0
    status: InterviewStatus = "in-progress"
    created_at: dt.datetime = Field(default_factory=utc_now)


class _MessageBase(Document):
    content: str
    timestamp: dt.datetime = Field(default_factory=utc_now)


class UserQuestion(_MessageBase):
    type: Literal["user-question"] = "user-question"


class AiAnswer(_MessageBase):
    type: Literal["ai-answer"] = "ai-answer"
    message_id: str


class UserAnswer(_MessageBase):
    type: Literal["user-answer"] = "user-answer"


class AiQuestion(_MessageBase):
    type: Literal["ai-question"] = "ai-question"


class AiFeedback(_MessageBase):
    type: Literal["ai-feedback"] = "ai-feedback"
    score: int = Field(ge=0, le=100)


class SystemMessage(_MessageBase):
    type: Literal["system"] = "system"


Message = Annotated[
    Union[UserQuestion, AiAnswer, UserAnswer, AiQuestion, AiFeedback, SystemMessage],
    Field(discriminator="type"),
]


class PracticeSession(Document):
    session_id: str
    user_id: str
    topic: str
    mode: PracticeMode
    messages: List[Message] = Field(default_factory=list)
    created_at: dt.datetime = Field(default_factory=utc_now)
    updated_at: dt.datetime = Field(default_factory=utc_now)


__all__ = [
    "AiAnswer",
    "AiFeedback",
    "AiQuestion",
    "Interview",
    "InterviewStatus",
    "Message",
    "PracticeMode",
    "PracticeSession",
    "QuestionAnswerRecord",
    "SystemMessage",
    "UserAnswer",
    "UserQuestion",
    "utc_now",
]
