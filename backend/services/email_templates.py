"""Outreach email generation (cold, referral, follow-up).

Email output is free text rather than JSON, so instead of the retry loop it
goes through a normalizer that guarantees ``Subject:`` and ``Email:`` sections.
"""

import logging
import re

from models.schemas.email_template import EmailTemplate, TemplateMeta
from services import prompt_builder
from services.ai_output.retry import TextGenerator

logger = logging.getLogger(__name__)

HIGHLIGHT_CHARS = 1500
MAX_UNLABELLED_LINES = 120
DEFAULT_SUBJECT = "Application update"

_SUBJECT_LINE_RE = re.compile(r"(^|\n)\s*Subject\s*:", re.IGNORECASE)
_EMAIL_LINE_RE = re.compile(r"(^|\n)\s*Email\s*:", re.IGNORECASE)
_SUBJECT_RE = re.compile(r"Subject\s*:\s*(.*?)(?:\n|$)", re.IGNORECASE)
_SUBJECT_PREFIX_RE = re.compile(r".*Subject\s*:\s*", re.IGNORECASE)
_EMAIL_LABEL_RE = re.compile(r"(^|\n)\s*Email\s*:\s*", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")


def _clean(value) -> str:
    return str(value or "").strip()


def validate_fields(
    template_type: str,
    target_role: str,
    yoe: str,
    jd: str = "",
    has_resume: bool = False,
) -> dict[str, str]:
    """Return a field -> message map; empty when the request is usable."""
    errs: dict[str, str] = {}
    if not _clean(target_role):
        errs["targetRole"] = "Target Role is required"
    if not _clean(yoe):
        errs["yoe"] = "YOE is required"

    if template_type in ("cold", "referral"):
        if not _clean(jd):
            errs["jd"] = "Job Description is required"
        if not has_resume:
            errs["resume"] = "Resume file is required"
    return errs


def extract_text_highlights(content: bytes | None, filename: str = "", content_type: str = "") -> str:
    """First 1500 chars of a plain-text resume, whitespace collapsed. Other formats yield ``""``."""
    if not content:
        return ""
    is_text = (content_type or "").startswith("text/") or (filename or "").lower().endswith(".txt")
    if not is_text:
        return ""
    text = content.decode("utf-8", errors="replace")
    return _WS_RE.sub(" ", text[:HIGHLIGHT_CHARS]).strip()


def normalize_email_output(text: str | None) -> str:
    """Strip fences and coerce model text into ``Subject: ...\\n\\nEmail:\\n...``."""
    if not text:
        return ""

    out = str(text).replace("```", "").replace("\r", "").strip()
    has_subject = bool(_SUBJECT_LINE_RE.search(out))
    has_email = bool(_EMAIL_LINE_RE.search(out))

    if not has_subject:
        lines = [line.strip() for line in out.split("\n") if line.strip()]
        if 0 < len(lines) <= MAX_UNLABELLED_LINES:
            first, rest = lines[0], lines[1:]
            out = f"Subject: {first}\n\nEmail:\n" + "\n".join(rest)
        else:
            out = f"Subject: {DEFAULT_SUBJECT}\n\nEmail:\n{out}"
    elif not has_email:
        parts = out.split("\n")
        subj_idx = next(
            (i for i, line in enumerate(parts) if re.search(r"(^|\s)Subject\s*:", line, re.IGNORECASE)),
            -1,
        )
        if subj_idx >= 0:
            subject = _SUBJECT_PREFIX_RE.sub("", parts[subj_idx], count=1).strip()
            rest = "\n".join(parts[:subj_idx] + parts[subj_idx + 1:]).strip()
            out = f"Subject: {subject}\n\nEmail:\n{rest}"
        else:
            out = f"Subject: {DEFAULT_SUBJECT}\n\nEmail:\n{out}"

    return out.strip()


def split_subject_body(content: str | None) -> tuple[str, str]:
    if not content:
        return "", ""
    subject_match = _SUBJECT_RE.search(content)
    subject = subject_match.group(1) if subject_match else ""

    email_match = _EMAIL_LINE_RE.search(content)
    if email_match:
        body = _EMAIL_LABEL_RE.sub("", content[email_match.start():], count=1)
    elif subject_match:
        body = content[subject_match.end():]
    else:
        body = content
    return subject.strip(), body.strip()


async def generate_template(
    generate: TextGenerator,
    template_type: str,
    target_role: str,
    yoe: str,
    jd: str = "",
    resume_highlights: str = "",
    resume_name: str | None = None,
    resume_size: int | None = None,
) -> EmailTemplate:
    """Single Gemini call; ``AIInvocationError`` propagates to the caller."""
    prompt = prompt_builder.build_email_prompt(template_type, target_role, yoe, jd, resume_highlights)
    output = normalize_email_output(await generate(prompt))

    if not _SUBJECT_LINE_RE.search(output):
        output = f"Subject: {target_role or 'Application'} opportunity\n\nEmail:\n{output}"
    if not _EMAIL_LINE_RE.search(output):
        output = f"{output}\n\nEmail:\nThank you for your time."

    output = output.strip()
    subject, body = split_subject_body(output)
    logger.info("Generated %s email template (%d chars)", template_type, len(output))
    return EmailTemplate(
        template=output,
        subject=subject,
        body=body,
        meta=TemplateMeta(
            type=template_type,
            usedResume=resume_name is not None,
            resumeName=resume_name,
            resumeSize=resume_size,
        ),
    )
