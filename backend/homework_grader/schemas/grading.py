"""
Expected shapes of the LLM grading output, one per rubric.

These describe what the prompts ask for. Model output is stored as returned;
the schemas are only used to flag drift in the logs.
"""

from typing import List

from pydantic import BaseModel, ConfigDict


class _GradingOutput(BaseModel):
    model_config = ConfigDict(extra="allow")

    totalScore: float
    maxScore: float
    percentage: float
    strengths: List[str] = []
    improvements: List[str] = []
    overall: str = ""


class QuestionResult(BaseModel):
    """Per-question result of the numeric rubric."""

    model_config = ConfigDict(extra="allow")

    number: int
    answerCorrect: bool
    score: float
    maxScore: float
    feedback: str = ""


class NumericGradingResult(_GradingOutput):
    """Math rubric: per-question correctness and scores."""

    questions: List[QuestionResult]


class ProficiencyCriteria(BaseModel):
    """Cambridge writing criteria, 0-5 each."""

    model_config = ConfigDict(extra="allow")

    content: float
    communicative: float
    organisation: float
    language: float


class ProficiencyGradingResult(_GradingOutput):
    """FCE rubric: CEFR level with named criteria."""

    cefrLevel: str
    targetLevel: str
    criteria: ProficiencyCriteria
    specificFeedback: List[str] = []
