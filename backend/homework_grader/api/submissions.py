"""
API endpoints for uploading and listing submissions.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from homework_grader.api.errors import error_response
from homework_grader.core.database import get_db
from homework_grader.schemas import SubmissionListResponse, UploadRequest, UploadResponse
from homework_grader.services.submission_service import SubmissionService

router = APIRouter(tags=["submissions"])


@router.post("/upload", response_model=UploadResponse)
def upload_submission(request: UploadRequest, db: Session = Depends(get_db)):
    """
    Upload a base64 document to Drive under its session date folder and
    record a submission with status=uploaded.

    The Drive client is built inside the handler so missing credentials get
    the same {success: false} response as any other failure.
    """
    try:
        submission = SubmissionService(db).upload(
            file_name=request.file_name,
            file_base64=request.file_base64,
            subject=request.subject,
            session_date=request.session_date,
        )
        return UploadResponse(
            file_id=submission.file_id,
            drive_url=submission.drive_url,
            submission_id=submission.id,
        )
    except Exception as e:
        db.rollback()
        return error_response("Upload", e)


@router.get("/submissions", response_model=SubmissionListResponse)
def list_submissions(
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    List submissions, newest upload first. startDate/endDate filter on
    sessionDate (inclusive) only when both are given.
    """
    try:
        submissions = SubmissionService(db).list(startDate, endDate)
        return SubmissionListResponse(data=[s.to_dict() for s in submissions])
    except Exception as e:
        return error_response("Get Submissions", e)
