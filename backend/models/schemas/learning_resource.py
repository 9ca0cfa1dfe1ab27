"""Learning links suggested alongside interview material, and their check results."""

from pydantic import BaseModel


class LinkCheck(BaseModel):
    url: str = ""
    isValid: bool
    status: str  # verified | unverified | invalid
    error: str | None = None


class LearningResource(BaseModel):
    title: str
    link: str
    summary: str = ""
    difficulty: str = ""
    isValidated: bool = False
    validationStatus: str = "pending"  # valid | unverified | invalid | pending
