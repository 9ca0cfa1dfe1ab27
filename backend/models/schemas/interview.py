from pydantic import BaseModel


class InterviewQA(BaseModel):
    question: str
    answer: str


class ConceptExplanation(BaseModel):
    title: str = ""
    explanation: str
    raw_fallback: bool = False  # explanation is cleaned raw text, not parsed JSON
