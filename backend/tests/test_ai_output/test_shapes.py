"""Tests for shape descriptors and the validator."""

import math

from models.schemas.ats_report import ATSReport
from models.schemas.coding_question import CodingQuestion
from services.ai_output.shapes import (
    ATS_REPORT_SHAPE,
    INTERVIEW_QA_SHAPE,
    ShapeDescriptor,
    _is_present,
    coding_question_shape,
    missing_fields,
    validate,
)


class TestPresence:
    def test_falsy_values(self):
        for value in (None, False, 0, 0.0, "", math.nan):
            assert not _is_present(value)

    def test_empty_containers_count_as_present(self):
        assert _is_present({})
        assert _is_present([])
        assert _is_present("x")
        assert _is_present(87)
        assert _is_present(True)

    def test_missing_fields_lists_array_fields(self):
        desc = ShapeDescriptor(shape="object", required=("a",), array_fields=("b",))
        assert missing_fields({"a": 1, "b": "nope"}, desc) == ["b"]
        assert missing_fields({"b": []}, desc) == ["a"]


class TestObjectValidation:
    def test_missing_overall_score(self):
        outcome = validate({"sectionScores": {}, "summary": "s"}, ATS_REPORT_SHAPE)
        assert not outcome.passed
        assert outcome.missing == ["overallScore"]
        assert "overallScore" in outcome.reason

    def test_lists_every_missing_field(self):
        outcome = validate({}, ATS_REPORT_SHAPE)
        assert outcome.missing == ["overallScore", "sectionScores", "summary"]

    def test_zero_score_counts_as_missing(self):
        outcome = validate({"overallScore": 0, "sectionScores": {"Skills": 0}, "summary": "s"}, ATS_REPORT_SHAPE)
        assert not outcome.passed
        assert outcome.missing == ["overallScore"]

    def test_valid_report_is_coerced(self):
        outcome = validate(
            {
                "overallScore": 72,
                "sectionScores": {"Experience": 70, "Skills": 80},
                "summary": "Solid backend profile.",
                "keywordAnalysis": {"present": ["Python"], "missing": ["AWS"]},
                "recommendations": [{"issue": "No metrics", "exampleFix": "Cut latency 30%"}],
            },
            ATS_REPORT_SHAPE,
        )
        assert outcome.passed
        assert isinstance(outcome.value, ATSReport)
        assert outcome.value.keywordAnalysis.missing == ["AWS"]

    def test_null_optional_parts_pass(self):
        outcome = validate(
            {
                "overallScore": 80,
                "sectionScores": {"Skills": 80},
                "summary": "ok",
                "keywordAnalysis": None,
                "recommendations": [{"issue": "x", "exampleFix": None}, "Add metrics", None],
            },
            ATS_REPORT_SHAPE,
        )
        assert outcome.passed
        assert outcome.value.keywordAnalysis.present == []
        assert [(r.issue, r.exampleFix) for r in outcome.value.recommendations] == [("x", ""), ("Add metrics", "")]

    def test_null_keyword_lists_pass(self):
        outcome = validate(
            {
                "overallScore": 80,
                "sectionScores": {"Skills": 80},
                "summary": "ok",
                "keywordAnalysis": {"present": None, "missing": ["AWS", None]},
                "recommendations": None,
            },
            ATS_REPORT_SHAPE,
        )
        assert outcome.passed
        assert outcome.value.keywordAnalysis.missing == ["AWS"]
        assert outcome.value.recommendations == []

    def test_bad_field_type_fails(self):
        outcome = validate(
            {"overallScore": 70, "sectionScores": "high", "summary": "s"},
            ATS_REPORT_SHAPE,
        )
        assert not outcome.passed
        assert "sectionScores" in outcome.missing

    def test_array_where_object_expected(self):
        outcome = validate([{"overallScore": 1}], ATS_REPORT_SHAPE)
        assert not outcome.passed
        assert "object" in outcome.reason

    def test_plain_descriptor_returns_dict(self):
        outcome = validate({"a": 1}, ShapeDescriptor(shape="object", required=("a",)))
        assert outcome.passed
        assert outcome.value == {"a": 1}


class TestArrayValidation:
    def _five_with_two_broken(self, valid_question):
        items = [dict(valid_question, statement=f"Problem {i}") for i in range(5)]
        items[1].pop("difficulty")
        items[3]["difficulty"] = ""
        return items

    def test_filters_invalid_elements(self, valid_question):
        outcome = validate(self._five_with_two_broken(valid_question), coding_question_shape())
        assert outcome.passed
        assert len(outcome.value) == 3
        assert outcome.dropped == 2
        assert all(isinstance(q, CodingQuestion) for q in outcome.value)
        assert [q.statement for q in outcome.value] == ["Problem 0", "Problem 2", "Problem 4"]

    def test_required_count_not_met(self, valid_question):
        outcome = validate(self._five_with_two_broken(valid_question), coding_question_shape(count=5))
        assert not outcome.passed
        assert "3" in outcome.reason
        assert "expected 5" in outcome.reason

    def test_extra_items_truncated_to_count(self, valid_question):
        items = [dict(valid_question, statement=f"P{i}") for i in range(4)]
        outcome = validate(items, coding_question_shape(count=2))
        assert outcome.passed
        assert [q.statement for q in outcome.value] == ["P0", "P1"]

    def test_constraints_must_be_list(self, valid_question):
        valid_question["constraints"] = "n <= 10"
        outcome = validate([valid_question], coding_question_shape())
        assert not outcome.passed
        assert outcome.missing == ["constraints"]

    def test_all_invalid_fails(self):
        outcome = validate([{"statement": "x"}, {"difficulty": "Easy"}], coding_question_shape())
        assert not outcome.passed
        assert "No valid items" in outcome.reason

    def test_empty_array_fails(self):
        outcome = validate([], INTERVIEW_QA_SHAPE)
        assert not outcome.passed

    def test_non_object_elements_dropped(self):
        outcome = validate(["junk", {"question": "Q?", "answer": "A."}, 3], INTERVIEW_QA_SHAPE)
        assert outcome.passed
        assert len(outcome.value) == 1
        assert outcome.dropped == 2

    def test_string_examples_kept(self):
        item = {"statement": "s", "difficulty": "Easy", "constraints": ["n>0"], "examples": ["Input: 1 Output: 2"]}
        outcome = validate([item, dict(item)], coding_question_shape(count=2))
        assert outcome.passed
        assert len(outcome.value) == 2
        assert outcome.value[0].examples[0].input == "Input: 1 Output: 2"

    def test_object_constraints_kept(self, valid_question):
        valid_question["constraints"] = [{"n": "1..10"}, 5]
        outcome = validate([valid_question], coding_question_shape(count=1))
        assert outcome.passed
        assert outcome.value[0].constraints == ['{"n": "1..10"}', "5"]

    def test_null_optional_fields_kept(self, valid_question):
        valid_question.update(
            solutionExplanation=None, solutions=None, inputFormat=None, dataTypes=None,
            examples=[{"input": "1", "output": None, "explanation": None}],
        )
        outcome = validate([valid_question], coding_question_shape())
        assert outcome.passed
        question = outcome.value[0]
        assert question.solutions == {}
        assert question.inputFormat == "single_line"
        assert question.dataTypes.output == "integer"

    def test_element_with_unusable_statement_dropped(self, valid_question):
        broken = dict(valid_question, statement={"text": "nested"})
        outcome = validate([broken, valid_question], coding_question_shape())
        assert outcome.passed
        assert len(outcome.value) == 1
        assert outcome.dropped == 1

    def test_object_where_array_expected(self):
        outcome = validate({"question": "Q?", "answer": "A."}, INTERVIEW_QA_SHAPE)
        assert not outcome.passed
        assert "not a JSON array" in outcome.reason
