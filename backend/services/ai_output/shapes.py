"""Declarative shape contracts for decoded model output.

Objects must carry every required field. Arrays are filtered element by
element; invalid elements are dropped and the result only fails when too few
survive (none at all, or fewer than an exact ``count``).
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from models.schemas.ats_report import ATSReport
from models.schemas.coding_question import CodingQuestion, CodingSolution
from models.schemas.interview import ConceptExplanation, InterviewQA
from services.ai_output.stripper import Shape


@dataclass(frozen=True)
class ShapeDescriptor:
    shape: Shape
    required: tuple[str, ...] = ()
    array_fields: tuple[str, ...] = ()
    count: int | None = None
    model: type[BaseModel] | None = None


@dataclass
class ValidationOutcome:
    passed: bool
    value: Any = None
    missing: list[str] = field(default_factory=list)
    reason: str = ""
    dropped: int = 0


def _is_present(value: Any) -> bool:
    """JavaScript-style truthiness: empty objects and arrays still count."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0  # NaN != NaN
    if isinstance(value, str):
        return value != ""
    return True


def missing_fields(item: dict, descriptor: ShapeDescriptor) -> list[str]:
    """Names of required fields that are absent/falsy or array fields that are not lists."""
    missing = [key for key in descriptor.required if not _is_present(item.get(key))]
    missing += [
        key for key in descriptor.array_fields
        if key not in missing and not isinstance(item.get(key), list)
    ]
    return missing


def _coerce(item: dict, model: type[BaseModel] | None) -> Any:
    if model is None:
        return item
    return model.model_validate(item)


def _validate_object(parsed: Any, descriptor: ShapeDescriptor) -> ValidationOutcome:
    if not isinstance(parsed, dict):
        return ValidationOutcome(
            passed=False,
            reason=f"Expected a JSON object, got {type(parsed).__name__}",
        )

    missing = missing_fields(parsed, descriptor)
    if missing:
        return ValidationOutcome(
            passed=False,
            missing=missing,
            reason=f"Missing required fields in AI response: {', '.join(missing)}",
        )

    try:
        value = _coerce(parsed, descriptor.model)
    except PydanticValidationError as e:
        bad = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        return ValidationOutcome(
            passed=False,
            missing=bad,
            reason=f"Invalid field values in AI response: {', '.join(bad) or 'unknown'}",
        )
    return ValidationOutcome(passed=True, value=value)


def _validate_array(parsed: Any, descriptor: ShapeDescriptor) -> ValidationOutcome:
    if not isinstance(parsed, list):
        return ValidationOutcome(
            passed=False,
            reason=f"Response is not a JSON array (got {type(parsed).__name__})",
        )

    accepted = []
    missing_seen: set[str] = set()
    for item in parsed:
        if not isinstance(item, dict):
            continue
        missing = missing_fields(item, descriptor)
        if missing:
            missing_seen.update(missing)
            continue
        try:
            accepted.append(_coerce(item, descriptor.model))
        except PydanticValidationError:
            continue

    dropped = len(parsed) - len(accepted)
    missing = sorted(missing_seen)

    if not accepted:
        return ValidationOutcome(
            passed=False,
            missing=missing,
            reason=f"No valid items found in AI response ({len(parsed)} received)",
            dropped=dropped,
        )

    if descriptor.count is not None:
        if len(accepted) < descriptor.count:
            return ValidationOutcome(
                passed=False,
                missing=missing,
                reason=f"AI returned {len(accepted)} valid items, expected {descriptor.count}",
                dropped=dropped,
            )
        accepted = accepted[: descriptor.count]

    return ValidationOutcome(passed=True, value=accepted, missing=missing, dropped=dropped)


def validate(parsed: Any, descriptor: ShapeDescriptor) -> ValidationOutcome:
    """Check ``parsed`` against ``descriptor``. Pure; never raises."""
    if descriptor.shape == "array":
        return _validate_array(parsed, descriptor)
    return _validate_object(parsed, descriptor)


ATS_REPORT_SHAPE = ShapeDescriptor(
    shape="object",
    required=("overallScore", "sectionScores", "summary"),
    model=ATSReport,
)

INTERVIEW_QA_SHAPE = ShapeDescriptor(
    shape="array",
    required=("question", "answer"),
    model=InterviewQA,
)

CONCEPT_EXPLANATION_SHAPE = ShapeDescriptor(
    shape="object",
    required=("explanation",),
    model=ConceptExplanation,
)

SOLUTION_SHAPE = ShapeDescriptor(
    shape="object",
    required=("code",),
    model=CodingSolution,
)


def coding_question_shape(count: int | None = None) -> ShapeDescriptor:
    """Descriptor for generated coding problems; ``count`` demands an exact yield."""
    return ShapeDescriptor(
        shape="array",
        required=("statement", "difficulty"),
        array_fields=("constraints", "examples"),
        count=count,
        model=CodingQuestion,
    )
