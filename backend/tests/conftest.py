"""Shared test configuration, pytest markers and a scripted text generator."""

import copy

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "live: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


class ScriptedGenerator:
    """Stand-in for ``generate_text`` that replays canned responses.

    Items that are exceptions get raised; the last item repeats once the
    script runs out.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        item = self.responses[min(len(self.prompts), len(self.responses)) - 1]
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def calls(self) -> int:
        return len(self.prompts)


@pytest.fixture
def scripted():
    return ScriptedGenerator


VALID_QUESTION = {
    "statement": "Return the sum of an array.",
    "difficulty": "Easy",
    "constraints": ["1 <= n <= 10^5"],
    "examples": [{"input": "[1, 2, 3]", "output": "6", "explanation": "1+2+3"}],
    "solutionExplanation": "Iterate and add.",
    "solutions": {"python": "print(sum(map(int, input().split())))"},
    "inputFormat": "single_line",
    "outputFormat": "single_value",
    "dataTypes": {"input": ["array<integer>"], "output": "integer"},
}


@pytest.fixture
def valid_question():
    return copy.deepcopy(VALID_QUESTION)
