"""FastAPI routes for open-ended topic practice sessions."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ai_service import AIService, get_ai_service
from api.auth import current_user_id
from api.schemas import (
    AnswerQuestionReq,
    AnswerQuestionResp,
    EvaluateAnswerReq,
    EvaluationResp,
    GenerateQuestionReq,
    GenerateQuestionResp,
    MessageResp,
    ModifyAnswerReq,
    ModifyAnswerResp,
    StartSessionReq,
    StartSessionResp,
)
from config.settings import settings
from observability import log_event
from services.sessions import new_message_id, optional_session, owned_session
from storage.models import AiAnswer, AiFeedback, AiQuestion, PracticeSession, UserAnswer, UserQuestion
from storage.practice import (
    delete_session,
    insert_session,
    list_sessions,
    push_messages,
    set_message_content,
)


router = APIRouter(prefix="/api/practice", tags=["practice"])


@router.post("/start-session", response_model=StartSessionResp)
def start_session(req: StartSessionReq, user_id: str = Depends(current_user_id)) -> StartSessionResp:
    session = insert_session(user_id=user_id, topic=req.topic, mode=req.mode)
    log_event("practice.start", session.session_id, user_id=user_id)
    return StartSessionResp(session_id=session.session_id)


@router.post("/generate-question", response_model=GenerateQuestionResp)
def generate_question(
    req: GenerateQuestionReq,
    user_id: str = Depends(current_user_id),
    ai: AIService = Depends(get_ai_service),
) -> GenerateQuestionResp:
    session = optional_session(req.session_id, user_id)
    question = ai.generate_topic_question(req.topic, req.previous_questions)
    if session is not None:
        push_messages(session.session_id, [AiQuestion(content=question)])
        log_event("practice.question", session.session_id, count=len(req.previous_questions) + 1)
    return GenerateQuestionResp(question=question)


@router.post("/answer-question", response_model=AnswerQuestionResp)
def answer_question(
    req: AnswerQuestionReq,
    user_id: str = Depends(current_user_id),
    ai: AIService = Depends(get_ai_service),
) -> AnswerQuestionResp:
    session = optional_session(req.session_id, user_id)
    answer = ai.answer_question(req.question, req.topic)
    message_id = new_message_id()
    if session is not None:
        push_messages(
            session.session_id,
            [
                UserQuestion(content=req.question),
                AiAnswer(content=answer, message_id=message_id),
            ],
        )
        log_event("practice.answer", session.session_id)
    return AnswerQuestionResp(answer=answer, message_id=message_id)


@router.post("/evaluate-answer", response_model=EvaluationResp)
def evaluate_answer(
    req: EvaluateAnswerReq,
    user_id: str = Depends(current_user_id),
    ai: AIService = Depends(get_ai_service),
) -> EvaluationResp:
    session = optional_session(req.session_id, user_id)
    evaluation = ai.evaluate_answer(req.question, req.answer)
    if session is not None:
        push_messages(
            session.session_id,
            [
                UserAnswer(content=req.answer),
                AiFeedback(content=evaluation.feedback, score=evaluation.score),
            ],
        )
        log_event("practice.evaluate", session.session_id, score=evaluation.score)
    return EvaluationResp(score=evaluation.score, feedback=evaluation.feedback)


@router.post("/modify-answer", response_model=ModifyAnswerResp)
def modify_answer(
    req: ModifyAnswerReq,
    user_id: str = Depends(current_user_id),
    ai: AIService = Depends(get_ai_service),
) -> ModifyAnswerResp:
    session = owned_session(req.session_id, user_id)
    original = next(
        (msg for msg in session.messages if getattr(msg, "message_id", None) == req.message_id),
        None,
    )
    if original is None:
        raise HTTPException(status_code=404, detail="Message not found")

    modified = ai.modify_answer(original.content, req.instruction)
    if not set_message_content(session.session_id, req.message_id, modified):
        raise HTTPException(status_code=404, detail="Message not found")
    log_event("practice.modify", session.session_id)
    return ModifyAnswerResp(modified_answer=modified)


@router.get("/history", response_model=List[PracticeSession])
def history(user_id: str = Depends(current_user_id)) -> List[PracticeSession]:
    return list_sessions(user_id, limit=settings.PRACTICE_HISTORY_LIMIT)


@router.get("/session/{session_id}", response_model=PracticeSession)
def fetch_session(session_id: str, user_id: str = Depends(current_user_id)) -> PracticeSession:
    return owned_session(session_id, user_id)


@router.delete("/session/{session_id}", response_model=MessageResp)
def remove_session(session_id: str, user_id: str = Depends(current_user_id)) -> MessageResp:
    owned_session(session_id, user_id)
    if not delete_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    log_event("practice.delete", session_id, user_id=user_id)
    return MessageResp(message="Session deleted successfully")
