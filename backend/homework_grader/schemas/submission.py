"""
Request and response schemas for the upload, grade and listing endpoints.
Wire names are camelCase.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UploadRequest(_CamelModel):
    """Request body for uploading a document to Drive."""

    file_name: str = Field(..., alias="fileName", description="Name of the file in Drive")
    file_base64: str = Field(..., alias="fileBase64", description="Document bytes, base64 encoded")
    subject: str = Field(..., description="Subject label, used later to pick the rubric")
    session_date: str = Field(
        ..., alias="sessionDate", description="ISO-8601 date/time; the date part names the folder"
    )


class UploadResponse(_CamelModel):
    """Response for a successful upload."""

    success: bool = True
    file_id: str = Field(..., alias="fileId")
    drive_url: Optional[str] = Field(None, alias="driveUrl")
    submission_id: str = Field(..., alias="submissionId")


class GradeRequest(_CamelModel):
    """Request body for grading a stored submission."""

    submission_id: str = Field(..., alias="submissionId")
    file_base64: str = Field(..., alias="fileBase64")
    subject: str
    total_questions: Optional[Union[int, str]] = Field(None, alias="totalQuestions")


class GradeResponse(BaseModel):
    """Response for a successful grading run."""

    success: bool = True
    result: Dict[str, Any]


class SubmissionListResponse(BaseModel):
    """Response for listing submissions."""

    success: bool = True
    data: List[Dict[str, Any]]


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    success: bool = False
    error: str
