"""ATS scoring output as returned by the model (camelCase mirrors the prompt contract).

Only ``overallScore``, ``sectionScores`` and ``summary`` are load-bearing. The
optional parts fall back to empty values when the model sends ``null`` for them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class KeywordAnalysis(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    present: list[str] = []
    missing: list[str] = []

    @field_validator("present", "missing", mode="before")
    @classmethod
    def _drop_nulls(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value


class Recommendation(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    issue: str = ""
    exampleFix: str = ""

    @field_validator("issue", "exampleFix", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ATSReport(BaseModel):
    """Structured ATS analysis.

    Scores are integers 0-100 by contract, but fractional values are kept
    rather than rejected.
    """
    overallScore: int | float
    sectionScores: dict[str, int | float]
    summary: str
    keywordAnalysis: KeywordAnalysis = KeywordAnalysis()
    recommendations: list[Recommendation] = []

    @field_validator("keywordAnalysis", mode="before")
    @classmethod
    def _default_keywords(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("recommendations", mode="before")
    @classmethod
    def _normalize_recommendations(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            # A bare string is the issue text without a suggested fix
            return [{"issue": item} if isinstance(item, str) else item for item in value if item is not None]
        return value
