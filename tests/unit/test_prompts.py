import pytest

from ai_service.prompts import (
    build_answer_prompt,
    build_evaluation_prompt,
    build_interview_question_prompt,
    build_modification_prompt,
    build_prompt,
    build_topic_question_prompt,
)


def test_topic_prompt_embeds_topic_and_every_previous_question():
    previous = ["What is a closure?", "Explain {braces} in f-strings", "How does the GIL work?"]
    prompt = build_topic_question_prompt("Python internals", previous)
    assert "Python internals" in prompt
    for question in previous:
        assert question in prompt
    assert "Make sure to ask something different." in prompt


def test_topic_prompt_without_history_has_no_repeat_instruction():
    prompt = build_topic_question_prompt("SQL")
    assert "SQL" in prompt
    assert "Previously asked questions" not in prompt
    assert prompt.rstrip().endswith("Question:")


def test_interview_prompt_embeds_role_and_difficulty():
    prompt = build_interview_question_prompt("Backend Engineer", "senior", ["Tell me about caching."])
    assert "Backend Engineer" in prompt
    assert "senior" in prompt
    assert "Tell me about caching." in prompt


def test_answer_prompt_requests_structure():
    prompt = build_answer_prompt("What is CAP?", "Distributed systems")
    assert "Topic: Distributed systems" in prompt
    assert "Question: What is CAP?" in prompt
    assert "Covers pitfalls" in prompt


def test_evaluation_prompt_requests_fixed_format():
    prompt = build_evaluation_prompt("Q?", "My answer")
    assert "Question: Q?" in prompt
    assert "Answer: My answer" in prompt
    assert "Score: [0-100]" in prompt
    assert "Feedback:" in prompt


def test_modification_prompt_embeds_original_and_instruction():
    prompt = build_modification_prompt("Original text", "Make it shorter")
    assert "Original text" in prompt
    assert "Make it shorter" in prompt
    assert prompt.rstrip().endswith("Modified Answer:")


def test_dispatcher_matches_builders_and_rejects_unknown_task():
    assert build_prompt("answer", question="Q", topic="T") == build_answer_prompt("Q", "T")
    with pytest.raises(ValueError):
        build_prompt("summarize", text="x")
