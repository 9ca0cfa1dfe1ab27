from pydantic import BaseModel, Field

from models.schemas.coding_question import CodingQuestion
from models.schemas.learning_resource import LearningResource


class ATSTextRequest(BaseModel):
    resume_text: str = Field(..., max_length=180000, description="Plain text resume content")
    role: str = ""
    experience: str = ""
    job_description: str = Field("", max_length=10000)


class InterviewQuestionsRequest(BaseModel):
    role: str = Field(..., min_length=1)
    experience: str = Field(..., min_length=1)
    topics_to_focus: str = Field(..., min_length=1)
    number_of_questions: int = Field(..., ge=1, le=30)


class ConceptExplainRequest(BaseModel):
    question: str = Field(..., min_length=1, max_length=5000)


class CodingQuestionsRequest(BaseModel):
    topics: str = Field(..., min_length=1)
    experience: str = Field(..., min_length=1)
    difficulty: str = "Easy"
    count: int = Field(5, ge=1, le=20)


class MoreCodingQuestionsRequest(BaseModel):
    topics: list[str] = Field(..., min_length=1)
    experience: str = Field(..., min_length=1)
    difficulty: str = "Easy"
    count: int = Field(5, ge=1, le=20)
    existing_statements: list[str] = []


class SolutionRequest(BaseModel):
    language: str = Field(..., min_length=1)
    question: CodingQuestion


class CheckOutputRequest(BaseModel):
    expected: str | None = None
    actual: str | None = None
    output_format: str = "single_value"
    data_type: str = "integer"


class SolutionTemplateRequest(BaseModel):
    language: str = "python"
    function_name: str = Field("solution", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    input_types: list[str] = ["integer"]
    output_type: str = "integer"
    input_format: str = "single_line"


class LinkValidationRequest(BaseModel):
    urls: list[str] = Field(..., min_length=1, max_length=50)


class ResourceValidationRequest(BaseModel):
    resources: list[LearningResource] = Field(..., min_length=1, max_length=50)
