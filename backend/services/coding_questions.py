"""Coding practice: problem generation, top-ups and reference solutions."""

import logging

from config import settings
from models.schemas.coding_question import CodingQuestion, CodingSolution
from services import prompt_builder
from services.ai_output import io_normalizer
from services.ai_output.retry import TextGenerator, run_with_retry
from services.ai_output.shapes import SOLUTION_SHAPE, coding_question_shape

logger = logging.getLogger(__name__)


def canonicalize_examples(question: CodingQuestion) -> CodingQuestion:
    """Rewrite example inputs/outputs into the stdin/stdout form the judge compares."""
    input_types = question.dataTypes.input_types
    for example in question.examples:
        example.input = io_normalizer.normalize_input(
            example.input, question.inputFormat, input_types
        )
        example.output = io_normalizer.normalize_output(
            example.output, question.outputFormat, question.dataTypes.output
        )
    return question


async def generate_questions(
    generate: TextGenerator,
    topics: str,
    experience: str,
    difficulty: str = "Easy",
    count: int = 5,
) -> list[CodingQuestion]:
    """Generate a fresh set of problems. Invalid ones are dropped; at least one must survive."""
    prompt = prompt_builder.build_coding_prompt(topics, experience, difficulty, count)
    questions: list[CodingQuestion] = await run_with_retry(
        generate,
        prompt,
        coding_question_shape(),
        max_attempts=settings.coding_max_retries + 1,
    )
    return [canonicalize_examples(q) for q in questions]


async def add_more_questions(
    generate: TextGenerator,
    topics: list[str] | str,
    experience: str,
    difficulty: str = "Easy",
    count: int = 5,
    existing_statements: list[str] | None = None,
) -> list[CodingQuestion]:
    """Generate exactly ``count`` additional problems for an existing session."""
    if isinstance(topics, str):
        topics = [topics]
    prompt = prompt_builder.build_more_coding_prompt(
        topics, experience, difficulty, count, existing_statements
    )
    questions: list[CodingQuestion] = await run_with_retry(
        generate,
        prompt,
        coding_question_shape(count=count),
        max_attempts=settings.coding_max_retries + 1,
    )
    logger.info("Generated %d additional coding questions", len(questions))
    return [canonicalize_examples(q) for q in questions]


async def get_solution(
    generate: TextGenerator,
    language: str,
    question: CodingQuestion,
) -> CodingSolution:
    prompt = prompt_builder.build_solution_prompt(
        language,
        question.statement,
        question.constraints,
        [ex.model_dump() for ex in question.examples],
    )
    return await run_with_retry(
        generate,
        prompt,
        SOLUTION_SHAPE,
        max_attempts=settings.solution_max_retries + 1,
        snippet_chars=settings.solution_snippet_chars,
    )
