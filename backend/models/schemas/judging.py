"""Canonicalized test-case values used when comparing program output."""

from pydantic import BaseModel


class ParsedTestInput(BaseModel):
    raw: str
    normalized: str
    format: str
    types: list[str]


class RawValues(BaseModel):
    expected: str | None = None
    actual: str | None = None


class OutputValidation(BaseModel):
    passed: bool
    expected: str
    actual: str
    raw: RawValues = RawValues()
