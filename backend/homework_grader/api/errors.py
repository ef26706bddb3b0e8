"""
Failure responses shared by all endpoints.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from homework_grader.core.errors import error_kind
from homework_grader.core.logging import get_logger

logger = get_logger(__name__)


def error_response(action: str, exc: BaseException) -> JSONResponse:
    """
    Log exc and answer HTTP 500 with {success: false, error}.
    Error kinds are only distinguished in the log.
    """
    logger.error("%s error [%s]: %s", action, error_kind(exc), exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": str(exc)},
    )
