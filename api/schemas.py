"""Pydantic schemas for the interview and practice API."""
from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storage.models import Interview, PracticeMode

NonEmptyStr = Annotated[str, Field(min_length=1)]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StartInterviewReq(ApiModel):
    role: NonEmptyStr
    difficulty: NonEmptyStr


class StartInterviewResp(ApiModel):
    interview_id: str


class InterviewQuestionResp(ApiModel):
    question: str
    question_number: int


class SubmitAnswerReq(ApiModel):
    question: NonEmptyStr
    answer: NonEmptyStr


class EvaluationResp(ApiModel):
    score: int
    feedback: str


class CompleteInterviewResp(ApiModel):
    total_score: int
    questions_answered: int
    interview: Interview


class StartSessionReq(ApiModel):
    topic: NonEmptyStr
    mode: PracticeMode


class StartSessionResp(ApiModel):
    session_id: str


class GenerateQuestionReq(ApiModel):
    session_id: Optional[str] = None
    topic: NonEmptyStr
    previous_questions: List[str] = Field(default_factory=list)


class GenerateQuestionResp(ApiModel):
    question: str


class AnswerQuestionReq(ApiModel):
    session_id: Optional[str] = None
    question: NonEmptyStr
    topic: NonEmptyStr


class AnswerQuestionResp(ApiModel):
    answer: str
    message_id: str


class EvaluateAnswerReq(ApiModel):
    session_id: Optional[str] = None
    question: NonEmptyStr
    answer: NonEmptyStr


class ModifyAnswerReq(ApiModel):
    session_id: NonEmptyStr
    message_id: NonEmptyStr
    instruction: NonEmptyStr


class ModifyAnswerResp(ApiModel):
    modified_answer: str


class MessageResp(ApiModel):
    message: str
