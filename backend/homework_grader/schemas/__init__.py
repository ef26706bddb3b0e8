"""
Schemas package initialization.
"""

from homework_grader.schemas.submission import (
    UploadRequest,
    UploadResponse,
    GradeRequest,
    GradeResponse,
    SubmissionListResponse,
    ErrorResponse,
)
from homework_grader.schemas.grading import (
    QuestionResult,
    NumericGradingResult,
    ProficiencyCriteria,
    ProficiencyGradingResult,
)

__all__ = [
    "UploadRequest",
    "UploadResponse",
    "GradeRequest",
    "GradeResponse",
    "SubmissionListResponse",
    "ErrorResponse",
    "QuestionResult",
    "NumericGradingResult",
    "ProficiencyCriteria",
    "ProficiencyGradingResult",
]
