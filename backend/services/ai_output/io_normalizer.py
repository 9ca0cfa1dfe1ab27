"""Canonical text forms for test-case inputs and program outputs.

Two values compare equal when their normalized strings are identical. The
transforms are purely textual: ``"1.0"`` and ``"1"`` stay different. Line
breaks survive bracket stripping so matrix rows stay rows.
"""

import re

from models.schemas.judging import OutputValidation, ParsedTestInput, RawValues

NULL_SENTINELS = frozenset({"", "none", "null", "undefined"})

_BRACKETS_RE = re.compile(r"[\[\]]")
_COMMA_RE = re.compile(r",[ \t]*")
_HSPACE_RE = re.compile(r"[ \t]+")


def _has_brackets(text: str) -> bool:
    return "[" in text and "]" in text


def flatten_brackets(text: str) -> str:
    """``"[1, 2, 3]"`` -> ``"1 2 3"``. Does not check that tokens are numbers."""
    text = _BRACKETS_RE.sub("", text)
    text = _COMMA_RE.sub(" ", text)
    text = _HSPACE_RE.sub(" ", text)
    return "\n".join(line.strip() for line in text.split("\n")).strip()


def normalize_input(
    raw: str | None,
    input_format: str = "single_line",
    data_types: list[str] | tuple[str, ...] = ("integer",),
) -> str:
    if not raw or not raw.strip():
        return ""

    text = raw.strip()
    if input_format == "matrix":
        return "\n".join(
            flatten_brackets(line) if _has_brackets(line) else line.strip()
            for line in text.split("\n")
        )

    if _has_brackets(text):
        text = flatten_brackets(text)

    if input_format == "multi_line":
        return "\n".join(line.strip() for line in text.split("\n"))

    return text


def normalize_output(
    raw: str | None,
    output_format: str = "single_value",
    data_type: str = "integer",
) -> str:
    if not raw or raw.strip().lower() in NULL_SENTINELS:
        return "null"

    text = raw.strip()
    if _has_brackets(text):
        text = flatten_brackets(text)

    if data_type == "boolean":
        lower = text.lower()
        if lower in ("true", "1"):
            return "true"
        if lower in ("false", "0"):
            return "false"

    if text.lower() in NULL_SENTINELS:
        return "null"
    return text


def validate_output(
    expected: str | None,
    actual: str | None,
    output_format: str = "single_value",
    data_type: str = "integer",
) -> OutputValidation:
    norm_expected = normalize_output(expected, output_format, data_type)
    norm_actual = normalize_output(actual, output_format, data_type)
    return OutputValidation(
        passed=norm_expected == norm_actual,
        expected=norm_expected,
        actual=norm_actual,
        raw=RawValues(expected=expected, actual=actual),
    )


def parse_test_case_input(
    raw: str | None,
    input_format: str = "single_line",
    data_types: list[str] | tuple[str, ...] = ("integer",),
) -> ParsedTestInput:
    return ParsedTestInput(
        raw=raw or "",
        normalized=normalize_input(raw, input_format, data_types),
        format=input_format,
        types=list(data_types),
    )
