"""
Submission upload and listing.
"""

import base64
import binascii
from typing import List, Optional

from sqlalchemy.orm import Session

from homework_grader.core.datetime_utils import session_folder_name
from homework_grader.core.errors import DataError, NotFoundError
from homework_grader.core.logging import get_logger
from homework_grader.models import Submission, SubmissionStatus
from homework_grader.services.drive_storage import DriveStorage, get_drive_storage

logger = get_logger(__name__)


def decode_document(file_base64: str) -> bytes:
    """
    Strictly decode a base64 document.

    Raises:
        DataError: If the payload is not valid base64.
    """
    try:
        return base64.b64decode(file_base64 or "", validate=True)
    except (binascii.Error, ValueError) as e:
        raise DataError(f"fileBase64 is not valid base64: {e}", cause=e) from e


class SubmissionService:
    """
    Stores uploaded documents in Drive and keeps one Submission row per upload.
    """

    def __init__(self, db: Session, storage: Optional[DriveStorage] = None):
        self.db = db
        self.storage = storage

    def upload(
        self,
        file_name: str,
        file_base64: str,
        subject: str,
        session_date: str,
    ) -> Submission:
        """
        Upload a document into its session date folder and record it.

        The payload is decoded before any remote call, so bad base64 leaves
        neither a Drive file nor a row. If the row insert fails after a
        successful upload, the Drive file stays (no cleanup). Without an
        injected storage, the Drive client is built here, after decoding.
        """
        content = decode_document(file_base64)
        storage = self.storage or get_drive_storage()
        folder_id = storage.get_or_create_folder(session_folder_name(session_date))
        uploaded = storage.upload_file(file_name, content, folder_id)

        submission = Submission(
            file_id=uploaded["id"],
            file_name=file_name,
            subject=subject,
            session_date=session_date,
            drive_url=uploaded.get("webViewLink"),
            status=SubmissionStatus.UPLOADED,
        )
        self.db.add(submission)
        self.db.commit()
        self.db.refresh(submission)
        logger.info("Recorded submission %s for %s", submission.id, file_name)
        return submission

    def get(self, submission_id: str) -> Submission:
        """
        Raises:
            NotFoundError: If no submission has this id.
        """
        submission = self.db.get(Submission, submission_id) if submission_id else None
        if submission is None:
            raise NotFoundError(f"Submission not found: {submission_id}")
        return submission

    def list(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> List[Submission]:
        """
        Submissions newest upload first. When both bounds are given, only
        those with start_date <= session_date <= end_date (string comparison).
        """
        query = self.db.query(Submission)
        if start_date and end_date:
            query = query.filter(
                Submission.session_date >= start_date,
                Submission.session_date <= end_date,
            )
        return query.order_by(Submission.uploaded_at.desc()).all()
