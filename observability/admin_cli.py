"""Lightweight CLI helpers for inspecting stored interviews and practice sessions."""
from __future__ import annotations

import argparse
import sqlite3

from config.settings import settings


def tail_interviews(limit: int = 20) -> None:
    conn = sqlite3.connect(settings.DB_PATH)
    try:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT created_at, interview_id, user_id, role, difficulty, status, total_score,
                   json_array_length(questions)
            FROM interviews
            ORDER BY created_at DESC
            LIMIT ?
            """,
            (limit,),
        )
        for row in cursor.fetchall():
            ts, interview_id, user_id, role, difficulty, status, total, answered = row
            print(f"[{ts}] {interview_id} user={user_id} {role}/{difficulty} {status} score={total} answered={answered}")
    finally:
        conn.close()


def tail_sessions(limit: int = 20) -> None:
    conn = sqlite3.connect(settings.DB_PATH)
    try:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT updated_at, session_id, user_id, topic, mode, json_array_length(messages)
            FROM practice_sessions
            ORDER BY updated_at DESC
            LIMIT ?
            """,
            (limit,),
        )
        for row in cursor.fetchall():
            ts, session_id, user_id, topic, mode, count = row
            print(f"[{ts}] {session_id} user={user_id} topic={topic} mode={mode} messages={count}")
    finally:
        conn.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--tail-interviews", type=int, help="Show the latest interviews")
    parser.add_argument("--tail-sessions", type=int, help="Show the latest practice sessions")
    args = parser.parse_args(argv)

    if args.tail_interviews:
        tail_interviews(args.tail_interviews)
    if args.tail_sessions:
        tail_sessions(args.tail_sessions)


if __name__ == "__main__":
    main()
