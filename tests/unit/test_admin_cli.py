from observability import admin_cli
from storage.interviews import append_answer, insert_interview
from storage.models import AiQuestion, QuestionAnswerRecord
from storage.practice import insert_session, push_messages


def test_tail_commands_print_rows(capsys):
    interview = insert_interview(user_id="u1", role="SRE", difficulty="hard")
    append_answer(
        interview.interview_id,
        QuestionAnswerRecord(question="Q", user_answer="A", score=60, feedback="f"),
    )
    session = insert_session(user_id="u2", topic="Redis", mode="user-answers")
    push_messages(session.session_id, [AiQuestion(content="What is eviction?")])

    admin_cli.main(["--tail-interviews", "5", "--tail-sessions", "5"])
    out = capsys.readouterr().out
    assert f"{interview.interview_id} user=u1 SRE/hard in-progress score=60 answered=1" in out
    assert f"{session.session_id} user=u2 topic=Redis mode=user-answers messages=1" in out
