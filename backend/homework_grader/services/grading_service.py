"""
AI grading of stored submissions.
"""

import json
from typing import Any, Dict, Optional, Union

from sqlalchemy.orm import Session

from homework_grader.core.config import get_config
from homework_grader.core.errors import DataError
from homework_grader.core.logging import get_logger
from homework_grader.services.ai_providers import LLMProvider, get_llm_provider
from homework_grader.services.grading_prompts import GRADING_USER_PROMPT
from homework_grader.services.rubrics import select_rubric
from homework_grader.services.submission_service import SubmissionService

logger = get_logger(__name__)

DOCUMENT_MIME_TYPE = "application/pdf"


def document_data_uri(file_base64: str, mime_type: str = DOCUMENT_MIME_TYPE) -> str:
    """Inline a base64 document as a data URI."""
    return f"data:{mime_type};base64,{file_base64}"


def parse_grading_output(text: Optional[str]) -> Dict[str, Any]:
    """
    Parse the model reply as a single JSON object.

    Raises:
        DataError: If the reply is empty, not JSON, or not an object.
    """
    if not text:
        raise DataError("Grading model returned an empty response")
    try:
        result = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataError(f"Grading model returned invalid JSON: {e}", cause=e) from e
    if not isinstance(result, dict):
        raise DataError(f"Grading model returned {type(result).__name__}, expected a JSON object")
    return result


class GradingService:
    """
    Grades a submission's document with the rubric picked from its subject
    and stores the result on the submission.
    """

    def __init__(self, db: Session, llm: Optional[LLMProvider] = None):
        self.db = db
        self.llm = llm
        self.submissions = SubmissionService(db)

    async def grade(
        self,
        submission_id: str,
        file_base64: str,
        subject: str,
        total_questions: Optional[Union[int, str]] = None,
    ) -> Dict[str, Any]:
        """
        Grade and store. Returns the parsed grading result.

        Raises:
            UnrecognizedSubjectError: No rubric matches subject (no model call is made).
            NotFoundError: submission_id does not exist (no model call is made).
            UpstreamAuthError, UpstreamAPIError: The model call failed.
            DataError: The reply is not a JSON object.
        """
        rubric = select_rubric(subject)
        submission = self.submissions.get(submission_id)

        llm = self.llm or get_llm_provider()
        temperature = get_config().llm.temperature
        logger.info(
            "Grading submission %s: rubric=%s, model=%s",
            submission_id,
            rubric.name,
            llm.model_name,
        )
        response = await llm.complete(
            GRADING_USER_PROMPT.format(total_questions=total_questions),
            system_prompt=rubric.system_prompt,
            document_url=document_data_uri(file_base64),
            json_output=True,
            temperature=temperature,
        )
        result = parse_grading_output(response)

        problems = rubric.schema_problems(result)
        if problems:
            logger.warning(
                "Grading result for %s does not match the %s rubric schema: %s",
                submission_id,
                rubric.name,
                "; ".join(problems),
            )

        submission.mark_graded(result)
        self.db.commit()
        logger.info("Submission %s graded", submission_id)
        return result
