"""
Services package initialization.
"""

from homework_grader.services.drive_storage import DriveStorage, get_drive_storage
from homework_grader.services.submission_service import SubmissionService, decode_document
from homework_grader.services.grading_service import GradingService
from homework_grader.services.rubrics import Rubric, NumericRubric, ProficiencyRubric, select_rubric

__all__ = [
    "DriveStorage",
    "get_drive_storage",
    "SubmissionService",
    "decode_document",
    "GradingService",
    "Rubric",
    "NumericRubric",
    "ProficiencyRubric",
    "select_rubric",
]
