"""Pydantic contracts for model output handed to the features."""

from models.schemas.ats_report import ATSReport, KeywordAnalysis, Recommendation
from models.schemas.coding_question import CodingExample, CodingQuestion, CodingSolution, DataTypes
from models.schemas.email_template import EmailTemplate, TemplateMeta
from models.schemas.interview import ConceptExplanation, InterviewQA
from models.schemas.judging import OutputValidation, ParsedTestInput
from models.schemas.learning_resource import LearningResource, LinkCheck

__all__ = [
    "ATSReport",
    "KeywordAnalysis",
    "Recommendation",
    "CodingExample",
    "CodingQuestion",
    "CodingSolution",
    "DataTypes",
    "EmailTemplate",
    "TemplateMeta",
    "ConceptExplanation",
    "InterviewQA",
    "OutputValidation",
    "ParsedTestInput",
    "LearningResource",
    "LinkCheck",
]
