"""FastAPI routes for role-based mock interviews."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ai_service import AIService, get_ai_service
from api.auth import current_user_id
from api.schemas import (
    CompleteInterviewResp,
    EvaluationResp,
    InterviewQuestionResp,
    StartInterviewReq,
    StartInterviewResp,
    SubmitAnswerReq,
)
from config.settings import settings
from observability import log_event
from services.sessions import owned_interview
from storage.interviews import InterviewCompleted, append_answer, insert_interview, list_interviews, set_status
from storage.models import Interview, QuestionAnswerRecord


router = APIRouter(prefix="/api/interview", tags=["interview"])


@router.post("/start", response_model=StartInterviewResp)
def start(req: StartInterviewReq, user_id: str = Depends(current_user_id)) -> StartInterviewResp:
    interview = insert_interview(user_id=user_id, role=req.role, difficulty=req.difficulty)
    log_event("interview.start", interview.interview_id, user_id=user_id)
    return StartInterviewResp(interview_id=interview.interview_id)


@router.get("/history", response_model=List[Interview])
def history(user_id: str = Depends(current_user_id)) -> List[Interview]:
    return list_interviews(user_id, limit=settings.INTERVIEW_HISTORY_LIMIT)


@router.get("/{interview_id}", response_model=Interview)
def fetch(interview_id: str, user_id: str = Depends(current_user_id)) -> Interview:
    return owned_interview(interview_id, user_id)


@router.get("/{interview_id}/question", response_model=InterviewQuestionResp)
def next_question(
    interview_id: str,
    user_id: str = Depends(current_user_id),
    ai: AIService = Depends(get_ai_service),
) -> InterviewQuestionResp:
    interview = owned_interview(interview_id, user_id)
    previous = [record.question for record in interview.questions]
    question = ai.generate_interview_question(interview.role, interview.difficulty, previous)
    log_event("interview.question", interview_id, count=len(previous) + 1)
    return InterviewQuestionResp(question=question, question_number=len(previous) + 1)


@router.post("/{interview_id}/answer", response_model=EvaluationResp)
def submit_answer(
    interview_id: str,
    req: SubmitAnswerReq,
    user_id: str = Depends(current_user_id),
    ai: AIService = Depends(get_ai_service),
) -> EvaluationResp:
    interview = owned_interview(interview_id, user_id)
    if interview.status == "completed":
        raise HTTPException(status_code=400, detail="Interview already completed")

    evaluation = ai.evaluate_answer(req.question, req.answer)
    record = QuestionAnswerRecord(
        question=req.question,
        user_answer=req.answer,
        score=evaluation.score,
        feedback=evaluation.feedback,
    )
    try:
        updated = append_answer(interview_id, record)
    except InterviewCompleted:
        raise HTTPException(status_code=400, detail="Interview already completed")
    if updated is None:
        raise HTTPException(status_code=404, detail="Interview not found")
    log_event("interview.answer", interview_id, score=evaluation.score)
    return EvaluationResp(score=evaluation.score, feedback=evaluation.feedback)


@router.post("/{interview_id}/complete", response_model=CompleteInterviewResp)
def complete(interview_id: str, user_id: str = Depends(current_user_id)) -> CompleteInterviewResp:
    owned_interview(interview_id, user_id)
    interview = set_status(interview_id, "completed")
    if interview is None:
        raise HTTPException(status_code=404, detail="Interview not found")
    log_event("interview.complete", interview_id, score=interview.total_score, count=len(interview.questions))
    return CompleteInterviewResp(
        total_score=interview.total_score,
        questions_answered=len(interview.questions),
        interview=interview,
    )
