"""Persistence helpers for interview documents."""
from __future__ import annotations

import datetime as dt
import json
import sqlite3
import uuid
from typing import List, Optional

from services.scoring import mean_score

from .models import Interview, InterviewStatus, QuestionAnswerRecord
from .sqlite import get_conn, write_txn


class InterviewCompleted(Exception):
    """Raised when an answer is appended to an interview that is already completed."""


def _ts(value: dt.datetime) -> str:
    return value.isoformat(timespec="microseconds")


def _from_row(row: sqlite3.Row) -> Interview:
    return Interview(
        interview_id=row["interview_id"],
        user_id=row["user_id"],
        role=row["role"],
        difficulty=row["difficulty"],
        questions=[QuestionAnswerRecord.model_validate(item) for item in json.loads(row["questions"])],
        total_score=row["total_score"],
        status=row["status"],
        created_at=row["created_at"],
    )


def _dump_questions(records: List[QuestionAnswerRecord]) -> str:
    return json.dumps([record.model_dump(mode="json", by_alias=True) for record in records])


def _select(conn: sqlite3.Connection, interview_id: str) -> Optional[Interview]:
    row = conn.execute("SELECT * FROM interviews WHERE interview_id = ?", (interview_id,)).fetchone()
    return _from_row(row) if row else None


def insert_interview(*, user_id: str, role: str, difficulty: str) -> Interview:
    """Create an empty in-progress interview and return it."""

    interview = Interview(
        interview_id=uuid.uuid4().hex,
        user_id=user_id,
        role=role,
        difficulty=difficulty,
    )
    with get_conn() as conn:
        conn.execute(
            """INSERT INTO interviews
               (interview_id, user_id, role, difficulty, questions, total_score, status, created_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                interview.interview_id,
                interview.user_id,
                interview.role,
                interview.difficulty,
                _dump_questions(interview.questions),
                interview.total_score,
                interview.status,
                _ts(interview.created_at),
            ),
        )
    return interview


def get_interview(interview_id: str) -> Optional[Interview]:
    with get_conn() as conn:
        return _select(conn, interview_id)


def list_interviews(user_id: str, *, limit: int = 10) -> List[Interview]:
    """Return the user's most recent interviews, newest first."""

    with get_conn() as conn:
        rows = conn.execute(
            """SELECT * FROM interviews
               WHERE user_id = ?
               ORDER BY created_at DESC, rowid DESC
               LIMIT ?""",
            (user_id, limit),
        ).fetchall()
    return [_from_row(row) for row in rows]


def append_answer(interview_id: str, record: QuestionAnswerRecord) -> Optional[Interview]:
    """Append a QA record and recompute the aggregate score from all records.

    Returns the updated interview, or None when it does not exist. Raises
    ``InterviewCompleted`` if the interview was completed before the write
    lock was taken.
    """

    with write_txn() as conn:
        interview = _select(conn, interview_id)
        if interview is None:
            return None
        if interview.status == "completed":
            raise InterviewCompleted(interview_id)
        interview.questions.append(record)
        interview.total_score = mean_score(item.score for item in interview.questions)
        conn.execute(
            "UPDATE interviews SET questions = ?, total_score = ? WHERE interview_id = ?",
            (_dump_questions(interview.questions), interview.total_score, interview_id),
        )
    return interview


def set_status(interview_id: str, status: InterviewStatus) -> Optional[Interview]:
    with write_txn() as conn:
        interview = _select(conn, interview_id)
        if interview is None:
            return None
        interview.status = status
        conn.execute("UPDATE interviews SET status = ? WHERE interview_id = ?", (status, interview_id))
    return interview


__all__ = ["InterviewCompleted", "append_answer", "get_interview", "insert_interview", "list_interviews", "set_status"]
