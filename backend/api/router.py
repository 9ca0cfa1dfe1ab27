import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_link_validator, get_text_generator
from config import settings
from models.requests import (
    ATSTextRequest,
    CheckOutputRequest,
    CodingQuestionsRequest,
    ConceptExplainRequest,
    InterviewQuestionsRequest,
    LinkValidationRequest,
    MoreCodingQuestionsRequest,
    ResourceValidationRequest,
    SolutionRequest,
    SolutionTemplateRequest,
)
from models.responses import (
    CodingQuestionsResponse,
    HealthResponse,
    InterviewQuestionsResponse,
    LearningResourcesResponse,
    LinkValidationResponse,
    SolutionTemplateResponse,
)
from models.schemas import (
    ATSReport,
    CodingSolution,
    ConceptExplanation,
    EmailTemplate,
    OutputValidation,
)
from services import (
    ats_scorer,
    coding_questions,
    email_templates,
    interview_prep,
    pdf_parser,
    solution_templates,
)
from services.ai_output import io_normalizer
from services.ai_output.errors import AIInvocationError, RetryExhaustedError
from services.ai_output.retry import TextGenerator
from services.link_validator import FALLBACK_RESOURCES, LinkValidator, fallback_resources

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

AI_UNAVAILABLE = "AI service is temporarily unavailable"


def _ai_failure(error: RetryExhaustedError | AIInvocationError, message: str) -> HTTPException:
    """502 for anything the model side got wrong; invalid content carries a raw snippet."""
    if isinstance(error, AIInvocationError) or error.cause == "invocation":
        return HTTPException(status_code=502, detail={"message": AI_UNAVAILABLE, "error": str(error)})
    return HTTPException(
        status_code=502,
        detail={
            "message": message,
            "error": str(error.last_error),
            "raw": error.raw_snippet or "No response text",
        },
    )


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", gemini_configured=bool(settings.gemini_api_key))


# --- ATS ---

async def _score(generate: TextGenerator, resume_text: str, role: str, experience: str, jd: str) -> ATSReport:
    try:
        return await ats_scorer.score_resume(generate, resume_text, role, experience, jd)
    except ats_scorer.ResumeTextError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RetryExhaustedError as e:
        raise _ai_failure(e, "AI returned invalid JSON for ATS analysis")


@router.post("/ats/score", response_model=ATSReport)
@limiter.limit("10/minute")
async def score_resume(
    request: Request,
    resume_file: UploadFile = File(...),
    role: str = Form(""),
    experience: str = Form(""),
    job_description: str = Form(""),
    generate: TextGenerator = Depends(get_text_generator),
):
    filename = (resume_file.filename or "").lower()
    if not filename.endswith((".pdf", ".docx")):
        raise HTTPException(status_code=400, detail="Only PDF and DOCX files are accepted")

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = pdf_parser.extract_resume_text(filename, content)
    except Exception:
        logger.exception("Text extraction failed for %s", filename)
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    return await _score(generate, resume_text, role, experience, job_description)


@router.post("/ats/score/text", response_model=ATSReport)
@limiter.limit("10/minute")
async def score_resume_text(
    request: Request,
    body: ATSTextRequest,
    generate: TextGenerator = Depends(get_text_generator),
):
    return await _score(generate, body.resume_text, body.role, body.experience, body.job_description)


# --- Interview prep ---

@router.post("/interview/questions", response_model=InterviewQuestionsResponse)
@limiter.limit("10/minute")
async def interview_questions(
    request: Request,
    body: InterviewQuestionsRequest,
    generate: TextGenerator = Depends(get_text_generator),
):
    try:
        questions = await interview_prep.generate_interview_questions(
            generate, body.role, body.experience, body.topics_to_focus, body.number_of_questions
        )
    except RetryExhaustedError as e:
        raise _ai_failure(e, "Failed to generate questions")
    return InterviewQuestionsResponse(questions=questions)


@router.post("/interview/explain", response_model=ConceptExplanation)
@limiter.limit("10/minute")
async def explain_concept(
    request: Request,
    body: ConceptExplainRequest,
    generate: TextGenerator = Depends(get_text_generator),
):
    try:
        return await interview_prep.explain_concept(generate, body.question)
    except RetryExhaustedError as e:
        raise _ai_failure(e, "Failed to generate concept explanation")


# --- Coding practice ---

@router.post("/coding/questions", response_model=CodingQuestionsResponse)
@limiter.limit("10/minute")
async def coding_questions_endpoint(
    request: Request,
    body: CodingQuestionsRequest,
    generate: TextGenerator = Depends(get_text_generator),
):
    try:
        questions = await coding_questions.generate_questions(
            generate, body.topics, body.experience, body.difficulty, body.count
        )
    except RetryExhaustedError as e:
        raise _ai_failure(e, f"Failed to generate questions after {e.attempts} attempts.")
    return CodingQuestionsResponse(questions=questions)


@router.post("/coding/questions/more", response_model=CodingQuestionsResponse)
@limiter.limit("10/minute")
async def more_coding_questions(
    request: Request,
    body: MoreCodingQuestionsRequest,
    generate: TextGenerator = Depends(get_text_generator),
):
    try:
        questions = await coding_questions.add_more_questions(
            generate,
            body.topics,
            body.experience,
            body.difficulty,
            body.count,
            body.existing_statements,
        )
    except RetryExhaustedError as e:
        raise _ai_failure(e, "AI returned invalid JSON for additional questions")
    return CodingQuestionsResponse(questions=questions)


@router.post("/coding/solution", response_model=CodingSolution)
@limiter.limit("10/minute")
async def coding_solution(
    request: Request,
    body: SolutionRequest,
    generate: TextGenerator = Depends(get_text_generator),
):
    try:
        return await coding_questions.get_solution(generate, body.language, body.question)
    except RetryExhaustedError as e:
        raise _ai_failure(e, "AI returned invalid solution format")


@router.post("/coding/check-output", response_model=OutputValidation)
async def check_output(body: CheckOutputRequest):
    return io_normalizer.validate_output(
        body.expected, body.actual, body.output_format, body.data_type
    )


@router.post("/coding/template", response_model=SolutionTemplateResponse)
async def solution_template(body: SolutionTemplateRequest):
    language = body.language.lower()
    if language not in solution_templates.SUPPORTED_LANGUAGES:
        language = "python"
    template = solution_templates.generate_solution_template(
        language, body.function_name, body.input_types, body.output_type, body.input_format
    )
    return SolutionTemplateResponse(language=language, template=template)


# --- Email templates ---

@router.post("/templates/generate", response_model=EmailTemplate)
@limiter.limit("10/minute")
async def generate_email_template(
    request: Request,
    template_type: str = Form("cold", alias="type"),
    targetRole: str = Form(""),
    yoe: str = Form(""),
    jd: str = Form(""),
    resume: UploadFile | None = File(None),
    generate: TextGenerator = Depends(get_text_generator),
):
    template_type = template_type.strip().lower() or "cold"
    errors = email_templates.validate_fields(
        template_type, targetRole, yoe, jd, has_resume=resume is not None
    )
    if errors:
        raise HTTPException(status_code=400, detail={"message": "Validation failed", "errors": errors})

    content = await resume.read() if resume is not None else None
    highlights = email_templates.extract_text_highlights(
        content,
        resume.filename if resume else "",
        resume.content_type if resume else "",
    )

    try:
        return await email_templates.generate_template(
            generate,
            template_type,
            targetRole.strip(),
            yoe.strip(),
            jd.strip(),
            highlights,
            resume_name=resume.filename if resume else None,
            resume_size=len(content) if content is not None else None,
        )
    except AIInvocationError as e:
        raise _ai_failure(e, AI_UNAVAILABLE)


# --- Learning links ---

@router.post("/links/validate", response_model=LinkValidationResponse)
@limiter.limit("20/minute")
async def validate_links(
    request: Request,
    body: LinkValidationRequest,
    validator: LinkValidator = Depends(get_link_validator),
):
    return LinkValidationResponse(results=await validator.validate_links(body.urls))


@router.post("/links/resources/validate", response_model=LearningResourcesResponse)
@limiter.limit("20/minute")
async def validate_resources(
    request: Request,
    body: ResourceValidationRequest,
    validator: LinkValidator = Depends(get_link_validator),
):
    return LearningResourcesResponse(resources=await validator.validate_resources(body.resources))


@router.get("/links/fallback/{category}", response_model=LearningResourcesResponse)
async def fallback_links(category: str):
    if category not in FALLBACK_RESOURCES:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown category. Expected one of: {', '.join(FALLBACK_RESOURCES)}",
        )
    return LearningResourcesResponse(resources=fallback_resources(category))
