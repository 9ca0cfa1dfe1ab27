import json

import pytest

from services.ai_output.errors import AIInvocationError, RetryExhaustedError
from services.interview_prep import explain_concept, generate_interview_questions


class TestInterviewQuestions:
    @pytest.mark.asyncio
    async def test_questions_parsed(self, scripted):
        payload = [
            {"question": "What is a closure?", "answer": "A function with its scope."},
            {"question": "Explain the event loop.", "answer": "It schedules callbacks."},
        ]
        gen = scripted(f"Here you go:\n```json\n{json.dumps(payload)}\n```")
        questions = await generate_interview_questions(gen, "Frontend Developer", "2", "JavaScript", 2)
        assert [q.question for q in questions] == ["What is a closure?", "Explain the event loop."]
        assert "Role: Frontend Developer" in gen.prompts[0]
        assert "Write 2 interview questions." in gen.prompts[0]

    @pytest.mark.asyncio
    async def test_items_without_answer_dropped(self, scripted):
        payload = [{"question": "Q1", "answer": ""}, {"question": "Q2", "answer": "A2"}]
        gen = scripted(json.dumps(payload))
        questions = await generate_interview_questions(gen, "SRE", "5", "Linux", 2)
        assert len(questions) == 1
        assert questions[0].answer == "A2"

    @pytest.mark.asyncio
    async def test_two_attempts(self, scripted):
        gen = scripted("no json at all")
        with pytest.raises(RetryExhaustedError):
            await generate_interview_questions(gen, "SRE", "5", "Linux", 3)
        assert gen.calls == 2


class TestExplainConcept:
    @pytest.mark.asyncio
    async def test_json_explanation(self, scripted):
        gen = scripted('{"title": "Closures", "explanation": "A closure captures variables."}')
        result = await explain_concept(gen, "What is a closure?")
        assert result.title == "Closures"
        assert result.explanation == "A closure captures variables."
        assert not result.raw_fallback

    @pytest.mark.asyncio
    async def test_prose_falls_back_to_raw_text(self, scripted):
        prose = "```\nA closure is a function bundled with its lexical environment.\n```"
        gen = scripted(prose)
        result = await explain_concept(gen, "What is a closure?")
        assert gen.calls == 2
        assert result.raw_fallback
        assert result.explanation == "A closure is a function bundled with its lexical environment."

    @pytest.mark.asyncio
    async def test_json_missing_explanation_is_an_error(self, scripted):
        gen = scripted('{"title": "Closures"}')
        with pytest.raises(RetryExhaustedError):
            await explain_concept(gen, "What is a closure?")

    @pytest.mark.asyncio
    async def test_invocation_failure_is_an_error(self, scripted):
        gen = scripted(AIInvocationError("boom"))
        with pytest.raises(RetryExhaustedError) as exc_info:
            await explain_concept(gen, "What is a closure?")
        assert exc_info.value.cause == "invocation"
