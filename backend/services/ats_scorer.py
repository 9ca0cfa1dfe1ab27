"""ATS resume scoring through Gemini."""

import logging

from config import settings
from models.schemas.ats_report import ATSReport
from services import prompt_builder
from services.ai_output.retry import TextGenerator, run_with_retry
from services.ai_output.shapes import ATS_REPORT_SHAPE

logger = logging.getLogger(__name__)

MAX_RESUME_CHARS = 180_000
MIN_RESUME_CHARS = 50


class ResumeTextError(ValueError):
    """Resume text is too short to score."""


async def score_resume(
    generate: TextGenerator,
    resume_text: str,
    role: str = "",
    experience: str = "",
    job_description: str = "",
) -> ATSReport:
    """Score a resume, retrying once with a stricter JSON-only instruction."""
    resume_text = (resume_text or "")[:MAX_RESUME_CHARS]
    if len(resume_text.strip()) < MIN_RESUME_CHARS:
        raise ResumeTextError(
            "Unable to extract text from resume. Please upload a valid PDF/DOCX."
        )

    prompt = prompt_builder.build_ats_prompt(resume_text, role, experience, job_description)
    report: ATSReport = await run_with_retry(
        generate,
        prompt,
        ATS_REPORT_SHAPE,
        max_attempts=settings.ats_max_retries + 1,
        escalation_prompt=prompt + prompt_builder.ATS_STRICT_JSON_SUFFIX,
    )
    logger.info("ATS score %s across %d sections", report.overallScore, len(report.sectionScores))
    return report
