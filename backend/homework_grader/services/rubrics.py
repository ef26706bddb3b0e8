"""
Rubric selection: maps a free-text subject to the prompt and the expected
output shape used for grading.
"""

from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from homework_grader.core.errors import UnrecognizedSubjectError
from homework_grader.core.logging import get_logger
from homework_grader.schemas.grading import NumericGradingResult, ProficiencyGradingResult
from homework_grader.services.grading_prompts import FCE_WRITING_PROMPT, MATH_GRADING_PROMPT

logger = get_logger(__name__)


class Rubric:
    """A grading rubric: system prompt plus the schema the model is asked to return."""

    name: str = ""
    keywords: Tuple[str, ...] = ()
    system_prompt: str = ""
    result_schema: Type[BaseModel]

    def matches(self, subject: str) -> bool:
        """Case-sensitive substring match on any keyword."""
        return any(keyword in subject for keyword in self.keywords)

    def schema_problems(self, result: Dict[str, Any]) -> List[str]:
        """
        Check a parsed model reply against result_schema.
        Returns human-readable problems; empty when it fits. Never raises.
        """
        try:
            self.result_schema.model_validate(result)
        except ValidationError as e:
            return [
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
        return []


class NumericRubric(Rubric):
    name = "numeric"
    keywords = ("Toán", "Math")
    system_prompt = MATH_GRADING_PROMPT
    result_schema = NumericGradingResult


class ProficiencyRubric(Rubric):
    name = "proficiency"
    keywords = ("FCE",)
    system_prompt = FCE_WRITING_PROMPT
    result_schema = ProficiencyGradingResult


# Checked in order; the first match wins
RUBRICS: Tuple[Rubric, ...] = (NumericRubric(), ProficiencyRubric())


def find_rubric(subject: Optional[str]) -> Optional[Rubric]:
    """Return the first rubric matching subject, or None."""
    if not subject:
        return None
    for rubric in RUBRICS:
        if rubric.matches(subject):
            return rubric
    return None


def select_rubric(subject: Optional[str]) -> Rubric:
    """
    Return the rubric for subject.

    Raises:
        UnrecognizedSubjectError: If no rubric matches.
    """
    rubric = find_rubric(subject)
    if rubric is None:
        raise UnrecognizedSubjectError(subject or "")
    logger.debug("Subject %r -> %s rubric", subject, rubric.name)
    return rubric
