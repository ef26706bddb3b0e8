"""
Tests for subject to rubric selection.
"""

import pytest

from homework_grader.core.errors import DataError, UnrecognizedSubjectError
from homework_grader.services.grading_prompts import FCE_WRITING_PROMPT, MATH_GRADING_PROMPT
from homework_grader.services.rubrics import NumericRubric, ProficiencyRubric, select_rubric

from conftest import NUMERIC_RESULT, PROFICIENCY_RESULT


class TestSelectRubric:

    @pytest.mark.parametrize("subject", ["Toán lớp 8", "Math 8A", "Bài tập Toán"])
    def test_math_subjects_use_numeric_rubric(self, subject):
        rubric = select_rubric(subject)
        assert isinstance(rubric, NumericRubric)
        assert rubric.system_prompt == MATH_GRADING_PROMPT

    @pytest.mark.parametrize("subject", ["FCE Writing", "FCE Essay 3"])
    def test_fce_subjects_use_proficiency_rubric(self, subject):
        rubric = select_rubric(subject)
        assert isinstance(rubric, ProficiencyRubric)
        assert rubric.system_prompt == FCE_WRITING_PROMPT

    @pytest.mark.parametrize("subject", ["Lịch sử", "fce writing", "", None])
    def test_unknown_subject_raises(self, subject):
        with pytest.raises(UnrecognizedSubjectError):
            select_rubric(subject)

    def test_unrecognized_subject_is_data_error(self):
        with pytest.raises(DataError, match="No grading rubric"):
            select_rubric("Chemistry")


class TestSchemaProblems:

    def test_numeric_result_fits(self):
        assert NumericRubric().schema_problems(NUMERIC_RESULT) == []

    def test_proficiency_result_fits(self):
        assert ProficiencyRubric().schema_problems(PROFICIENCY_RESULT) == []

    def test_missing_questions_reported(self):
        result = {k: v for k, v in NUMERIC_RESULT.items() if k != "questions"}
        problems = NumericRubric().schema_problems(result)
        assert any(p.startswith("questions") for p in problems)

    def test_numeric_result_does_not_fit_proficiency(self):
        problems = ProficiencyRubric().schema_problems(NUMERIC_RESULT)
        assert any(p.startswith("criteria") for p in problems)
