"""Helpers shared by the interview and practice session flows."""
from __future__ import annotations

import uuid
from typing import Optional

from fastapi import HTTPException

from storage.interviews import get_interview
from storage.models import Interview, PracticeSession
from storage.practice import get_session


def new_message_id() -> str:
    """Identifier assigned to an ai-answer so it can be modified later."""

    return f"msg_{uuid.uuid4().hex}"


def owned_interview(interview_id: str, user_id: str) -> Interview:
    """Load an interview owned by ``user_id`` or raise 404/403."""

    interview = get_interview(interview_id)
    if interview is None:
        raise HTTPException(status_code=404, detail="Interview not found")
    if interview.user_id != user_id:
        raise HTTPException(status_code=403, detail="Not authorized")
    return interview


def owned_session(session_id: str, user_id: str) -> PracticeSession:
    """Load a practice session owned by ``user_id`` or raise 404/403."""

    session = get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    if session.user_id != user_id:
        raise HTTPException(status_code=403, detail="Not authorized")
    return session


def optional_session(session_id: Optional[str], user_id: str) -> Optional[PracticeSession]:
    """Like ``owned_session`` but a missing ``session_id`` means no session."""

    if not session_id:
        return None
    return owned_session(session_id, user_id)


__all__ = ["new_message_id", "optional_session", "owned_interview", "owned_session"]
