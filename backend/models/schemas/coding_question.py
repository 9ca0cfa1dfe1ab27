"""Coding practice problems and solutions generated by the model.

A problem is usable once it has a statement, a difficulty and list-typed
constraints and examples. Everything else is best-effort: odd shapes are
coerced to text and nulls fall back to defaults rather than rejecting the item.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator


def _as_text(value: Any) -> str:
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return "" if value is None else str(value)


class CodingExample(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    input: str = ""
    output: str = ""
    explanation: str = ""

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_value(cls, data: Any) -> Any:
        # "Input: 1 Output: 2" style examples carry everything in one string
        if isinstance(data, (dict, BaseModel)):
            return data
        return {"input": data}

    @field_validator("input", "output", "explanation", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # Models sometimes emit [1, 2, 3] instead of "[1, 2, 3]"
        return _as_text(value)


class DataTypes(BaseModel):
    input: list[str] | str = ["integer"]
    output: str = "integer"

    @property
    def input_types(self) -> list[str]:
        return [self.input] if isinstance(self.input, str) else list(self.input)


class CodingQuestion(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    statement: str
    difficulty: str
    constraints: list[str]
    examples: list[CodingExample]
    solutionExplanation: str = ""
    solutions: dict[str, Any] = {}
    inputFormat: str = "single_line"
    outputFormat: str = "single_value"
    dataTypes: DataTypes = DataTypes()

    @field_validator("constraints", mode="before")
    @classmethod
    def _constraints_as_text(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_as_text(item) for item in value if item is not None]
        return value

    @field_validator("examples", mode="before")
    @classmethod
    def _drop_null_examples(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    @field_validator("solutionExplanation", mode="before")
    @classmethod
    def _explanation_as_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("solutions", mode="before")
    @classmethod
    def _solutions_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @field_validator("inputFormat", "outputFormat", mode="before")
    @classmethod
    def _default_format(cls, value: Any, info: ValidationInfo) -> Any:
        if value:
            return value
        return "single_line" if info.field_name == "inputFormat" else "single_value"

    @field_validator("dataTypes", mode="before")
    @classmethod
    def _default_data_types(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, DataTypes)) else {}


class CodingSolution(BaseModel):
    code: str
    explanation: str = ""
    timeComplexity: str = ""
    spaceComplexity: str = ""
