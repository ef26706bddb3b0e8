"""
Submission model: one uploaded assignment and its eventual grading result.
"""

import uuid
from enum import Enum
from typing import Any, Dict

from sqlalchemy import Column, String, Text, JSON, Enum as SQLEnum

from homework_grader.core.database import Base
from homework_grader.core.datetime_utils import now_iso


class SubmissionStatus(str, Enum):
    """Submission lifecycle. Only moves forward: uploaded -> graded."""

    UPLOADED = "uploaded"
    GRADED = "graded"


class Submission(Base):
    """
    Stored submission record.

    Created by the upload endpoint with status=uploaded. The grading endpoint
    is the only writer afterwards (see mark_graded).
    """

    __tablename__ = "submissions"

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    file_id = Column(String(128), nullable=False)
    file_name = Column(Text, nullable=False)
    subject = Column(Text, nullable=True)
    session_date = Column(String(64), nullable=True, index=True)
    drive_url = Column(Text, nullable=True)
    uploaded_at = Column(String, default=now_iso, index=True)
    status = Column(
        SQLEnum(SubmissionStatus, values_callable=lambda x: [m.value for m in x]),
        default=SubmissionStatus.UPLOADED,
        nullable=False,
    )
    grading_result = Column(JSON, nullable=True)
    graded_at = Column(String, nullable=True)

    def mark_graded(self, result: Dict[str, Any]) -> None:
        """Attach a grading result. Re-grading overwrites the result; status stays graded."""
        self.grading_result = result
        self.graded_at = now_iso()
        self.status = SubmissionStatus.GRADED

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation (camelCase), including the id."""
        data = {
            "id": self.id,
            "fileId": self.file_id,
            "fileName": self.file_name,
            "subject": self.subject,
            "sessionDate": self.session_date,
            "driveUrl": self.drive_url,
            "uploadedAt": self.uploaded_at,
            "status": self.status.value if self.status else None,
        }
        if self.grading_result is not None:
            data["gradingResult"] = self.grading_result
        if self.graded_at is not None:
            data["gradedAt"] = self.graded_at
        return data

    def __repr__(self) -> str:
        return f"<Submission(id={self.id}, file_name={self.file_name}, status={self.status})>"
