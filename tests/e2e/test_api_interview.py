import pytest
from fastapi.testclient import TestClient

from ai_service import AIService, get_ai_service
from api.auth import create_access_token
from api_server import app
from storage.interviews import get_interview, set_status


def _headers(user_id: str = "user-1") -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def client(make_completer):
    completer = make_completer(
        "How would you design a rate limiter?",
        "Score: 80\nFeedback: Good depth.",
        "Score: 65\nFeedback: Needs examples.",
    )
    app.dependency_overrides[get_ai_service] = lambda: AIService(completer)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _start(client: TestClient, user_id: str = "user-1") -> str:
    resp = client.post("/api/interview/start", json={"role": "Backend Engineer", "difficulty": "medium"}, headers=_headers(user_id))
    assert resp.status_code == 200
    return resp.json()["interviewId"]


def test_requires_authentication(client):
    resp = client.post("/api/interview/start", json={"role": "r", "difficulty": "d"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "No token, authorization denied"

    resp = client.get("/api/interview/history", headers={"Authorization": "Bearer bogus"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token is not valid"


def test_start_requires_role_and_difficulty(client):
    resp = client.post("/api/interview/start", json={"role": "Backend"}, headers=_headers())
    assert resp.status_code == 400
    assert "difficulty" in resp.json()["detail"]

    resp = client.post("/api/interview/start", json={"role": "", "difficulty": "easy"}, headers=_headers())
    assert resp.status_code == 400


def test_question_answer_complete_flow(client):
    interview_id = _start(client)

    question = client.get(f"/api/interview/{interview_id}/question", headers=_headers()).json()
    assert question == {"question": "How would you design a rate limiter?", "questionNumber": 1}

    first = client.post(
        f"/api/interview/{interview_id}/answer",
        json={"question": question["question"], "answer": "Token bucket per client."},
        headers=_headers(),
    )
    assert first.status_code == 200
    assert first.json() == {"score": 80, "feedback": "Good depth."}

    second = client.post(
        f"/api/interview/{interview_id}/answer",
        json={"question": "Next?", "answer": "Sliding window."},
        headers=_headers(),
    ).json()
    assert second["score"] == 65

    done = client.post(f"/api/interview/{interview_id}/complete", headers=_headers())
    assert done.status_code == 200
    body = done.json()
    assert body["totalScore"] == 73
    assert body["questionsAnswered"] == 2
    assert body["interview"]["status"] == "completed"
    assert body["interview"]["questions"][0]["userAnswer"] == "Token bucket per client."

    late = client.post(
        f"/api/interview/{interview_id}/answer",
        json={"question": "Q", "answer": "A"},
        headers=_headers(),
    )
    assert late.status_code == 400


def test_not_found_and_forbidden(client):
    interview_id = _start(client, "owner")

    assert client.get("/api/interview/missing/question", headers=_headers("owner")).status_code == 404
    assert client.get(f"/api/interview/{interview_id}/question", headers=_headers("intruder")).status_code == 403
    assert client.post(f"/api/interview/{interview_id}/complete", headers=_headers("intruder")).status_code == 403
    assert client.get(f"/api/interview/{interview_id}", headers=_headers("owner")).json()["role"] == "Backend Engineer"


def test_history_lists_only_own_interviews(client):
    mine = [_start(client, "me") for _ in range(2)]
    _start(client, "someone-else")

    history = client.get("/api/interview/history", headers=_headers("me")).json()
    assert [item["interviewId"] for item in history] == list(reversed(mine))


def test_answer_falls_back_when_model_is_down(down_completer):
    app.dependency_overrides[get_ai_service] = lambda: AIService(down_completer)
    try:
        client = TestClient(app)
        interview_id = _start(client)
        question = client.get(f"/api/interview/{interview_id}/question", headers=_headers()).json()
        assert "Backend Engineer" in question["question"]

        answer = " ".join(["word"] * 12)
        resp = client.post(
            f"/api/interview/{interview_id}/answer",
            json={"question": question["question"], "answer": answer},
            headers=_headers(),
        )
        assert resp.status_code == 200
        assert resp.json() == {"score": 50, "feedback": "Good attempt. Add more detail and examples."}
    finally:
        app.dependency_overrides.clear()


def test_answer_rejected_when_completed_during_evaluation():
    interview_id = None

    class CompletingCompleter:
        def complete(self, prompt, options=None):
            set_status(interview_id, "completed")
            return "Score: 90\nFeedback: Great."

    app.dependency_overrides[get_ai_service] = lambda: AIService(CompletingCompleter())
    try:
        client = TestClient(app)
        interview_id = _start(client)
        resp = client.post(
            f"/api/interview/{interview_id}/answer",
            json={"question": "Q", "answer": "A"},
            headers=_headers(),
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Interview already completed"
        assert get_interview(interview_id).questions == []
    finally:
        app.dependency_overrides.clear()
