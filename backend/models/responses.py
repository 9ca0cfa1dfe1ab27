from pydantic import BaseModel

from models.schemas.coding_question import CodingQuestion
from models.schemas.interview import InterviewQA
from models.schemas.learning_resource import LearningResource, LinkCheck


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False


class CodingQuestionsResponse(BaseModel):
    questions: list[CodingQuestion] = []


class InterviewQuestionsResponse(BaseModel):
    questions: list[InterviewQA] = []


class SolutionTemplateResponse(BaseModel):
    language: str
    template: str


class LinkValidationResponse(BaseModel):
    results: list[LinkCheck] = []


class LearningResourcesResponse(BaseModel):
    resources: list[LearningResource] = []
