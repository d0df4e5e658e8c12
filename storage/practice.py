"""Persistence helpers for practice session documents."""
from __future__ import annotations

import datetime as dt
import json
import sqlite3
import uuid
from typing import List, Optional, Sequence

from pydantic import TypeAdapter

from .models import Message, PracticeMode, PracticeSession, utc_now
from .sqlite import get_conn, write_txn

_MESSAGES = TypeAdapter(List[Message])


def _ts(value: dt.datetime) -> str:
    return value.isoformat(timespec="microseconds")


def _from_row(row: sqlite3.Row) -> PracticeSession:
    return PracticeSession(
        session_id=row["session_id"],
        user_id=row["user_id"],
        topic=row["topic"],
        mode=row["mode"],
        messages=_MESSAGES.validate_json(row["messages"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _dump_messages(messages: Sequence[Message]) -> str:
    return _MESSAGES.dump_json(list(messages), by_alias=True).decode("utf-8")


def _select(conn: sqlite3.Connection, session_id: str) -> Optional[PracticeSession]:
    row = conn.execute("SELECT * FROM practice_sessions WHERE session_id = ?", (session_id,)).fetchone()
    return _from_row(row) if row else None


def _save_messages(conn: sqlite3.Connection, session: PracticeSession) -> None:
    session.updated_at = utc_now()
    conn.execute(
        "UPDATE practice_sessions SET messages = ?, updated_at = ? WHERE session_id = ?",
        (_dump_messages(session.messages), _ts(session.updated_at), session.session_id),
    )


def insert_session(*, user_id: str, topic: str, mode: PracticeMode) -> PracticeSession:
    """Create an empty practice session and return it."""

    session = PracticeSession(session_id=uuid.uuid4().hex, user_id=user_id, topic=topic, mode=mode)
    with get_conn() as conn:
        conn.execute(
            """INSERT INTO practice_sessions
               (session_id, user_id, topic, mode, messages, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (
                session.session_id,
                session.user_id,
                session.topic,
                session.mode,
                _dump_messages(session.messages),
                _ts(session.created_at),
                _ts(session.updated_at),
            ),
        )
    return session


def get_session(session_id: str) -> Optional[PracticeSession]:
    with get_conn() as conn:
        return _select(conn, session_id)


def list_sessions(user_id: str, *, limit: int = 20) -> List[PracticeSession]:
    """Return the user's sessions ordered by last activity, newest first."""

    with get_conn() as conn:
        rows = conn.execute(
            """SELECT * FROM practice_sessions
               WHERE user_id = ?
               ORDER BY updated_at DESC, rowid DESC
               LIMIT ?""",
            (user_id, limit),
        ).fetchall()
    return [_from_row(row) for row in rows]


def push_messages(session_id: str, messages: Sequence[Message]) -> Optional[PracticeSession]:
    """Append ``messages`` in order; returns None when the session is gone."""

    with write_txn() as conn:
        session = _select(conn, session_id)
        if session is None:
            return None
        session.messages.extend(messages)
        _save_messages(conn, session)
    return session


def set_message_content(session_id: str, message_id: str, content: str) -> bool:
    """Rewrite the content of the message carrying ``message_id``.

    Returns False when the session or the message does not exist.
    """

    with write_txn() as conn:
        session = _select(conn, session_id)
        if session is None:
            return False
        for message in session.messages:
            if getattr(message, "message_id", None) == message_id:
                message.content = content
                break
        else:
            return False
        _save_messages(conn, session)
    return True


def delete_session(session_id: str) -> bool:
    with get_conn() as conn:
        cur = conn.execute("DELETE FROM practice_sessions WHERE session_id = ?", (session_id,))
        return cur.rowcount > 0


__all__ = [
    "delete_session",
    "get_session",
    "insert_session",
    "list_sessions",
    "push_messages",
    "set_message_content",
]
