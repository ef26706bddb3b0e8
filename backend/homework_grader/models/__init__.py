"""
Models package initialization.
"""

from homework_grader.models.submission import Submission, SubmissionStatus

__all__ = [
    "Submission",
    "SubmissionStatus",
]
