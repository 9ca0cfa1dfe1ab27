"""Interview Q&A generation and concept explanations."""

import logging

from config import settings
from models.schemas.interview import ConceptExplanation, InterviewQA
from services import prompt_builder
from services.ai_output.errors import ParseError, RetryExhaustedError
from services.ai_output.retry import TextGenerator, run_with_retry
from services.ai_output.shapes import CONCEPT_EXPLANATION_SHAPE, INTERVIEW_QA_SHAPE
from services.ai_output.stripper import strip_fences

logger = logging.getLogger(__name__)

# Prose answers can be long; cap what the fallback may return
CONCEPT_FALLBACK_CHARS = 20_000


async def generate_interview_questions(
    generate: TextGenerator,
    role: str,
    experience: str,
    topics: str,
    count: int,
) -> list[InterviewQA]:
    prompt = prompt_builder.build_interview_prompt(role, experience, topics, count)
    return await run_with_retry(
        generate,
        prompt,
        INTERVIEW_QA_SHAPE,
        max_attempts=settings.interview_max_retries + 1,
    )


async def explain_concept(generate: TextGenerator, question: str) -> ConceptExplanation:
    """Explain the concept behind ``question``.

    When the model keeps answering in prose instead of JSON, the prose itself is
    returned (fences stripped) with ``raw_fallback`` set. Invalid JSON that
    parses but lacks an explanation is still an error.
    """
    prompt = prompt_builder.build_concept_prompt(question)
    try:
        return await run_with_retry(
            generate,
            prompt,
            CONCEPT_EXPLANATION_SHAPE,
            max_attempts=settings.concept_max_retries + 1,
            snippet_chars=CONCEPT_FALLBACK_CHARS,
        )
    except RetryExhaustedError as e:
        text = strip_fences(e.raw_snippet)
        if isinstance(e.last_error, ParseError) and text:
            logger.warning("Concept explanation JSON parse failed, returning raw text instead")
            return ConceptExplanation(explanation=text, raw_fallback=True)
        raise
