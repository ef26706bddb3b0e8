"""
API routes package initialization.
"""

from fastapi import APIRouter

from homework_grader.api.submissions import router as submissions_router
from homework_grader.api.grading import router as grading_router

# Create main API router with v1 versioning
api_router = APIRouter(prefix="/api/v1")

api_router.include_router(submissions_router)
api_router.include_router(grading_router)

__all__ = ["api_router"]
