"""
Error types raised by the services.

Every service failure is one of four kinds. The API layer does not branch on
them: it logs the kind and answers HTTP 500 with the message.
"""

from typing import Optional


class GraderError(Exception):
    """Base class for all errors raised by homework_grader services."""

    kind = "error"

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class UpstreamAuthError(GraderError):
    """Credentials rejected by Google Drive or the LLM provider."""

    kind = "upstream_auth"


class UpstreamAPIError(GraderError):
    """Google Drive or the LLM provider returned an error (rate limit, bad request, outage)."""

    kind = "upstream_api"


class DataError(GraderError):
    """Input or model output could not be used (bad base64, unparseable JSON)."""

    kind = "data"


class UnrecognizedSubjectError(DataError):
    """No rubric matches the submitted subject."""

    def __init__(self, subject: str):
        self.subject = subject
        super().__init__(f"No grading rubric for subject: {subject!r}")


class NotFoundError(GraderError):
    """A submission id does not exist."""

    kind = "not_found"


def error_kind(exc: BaseException) -> str:
    """Kind label for logging; unexpected exceptions are 'internal'."""
    if isinstance(exc, GraderError):
        return exc.kind
    return "internal"
