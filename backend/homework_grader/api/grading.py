"""
API endpoint for AI grading of a stored submission.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from homework_grader.api.errors import error_response
from homework_grader.core.database import get_db
from homework_grader.schemas import GradeRequest, GradeResponse
from homework_grader.services.grading_service import GradingService

router = APIRouter(tags=["grading"])


@router.post("/grade", response_model=GradeResponse)
async def grade_submission(request: GradeRequest, db: Session = Depends(get_db)):
    """
    Grade the submitted document with the rubric for its subject and store
    the result on the submission (status=graded).
    """
    try:
        result = await GradingService(db).grade(
            submission_id=request.submission_id,
            file_base64=request.file_base64,
            subject=request.subject,
            total_questions=request.total_questions,
        )
        return GradeResponse(result=result)
    except Exception as e:
        db.rollback()
        return error_response("Grading", e)
