"""API routes for grading quiz answers."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from lexicard.application.learning.use_cases.quiz_answer_use_case import QuizAnswerUseCase
from lexicard.core import container
from lexicard.domain.common.exceptions import DomainError
from lexicard.exceptions import LexicardError
from lexicard.infrastructure.common.di import inject_use_case
from lexicard.infrastructure.learning.schemas import (
    AnswerCheckRequest,
    AnswerCheckResponse,
    AnswerValidateRequest,
    AnswerValidationResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/answers", tags=["answers"])


@router.post(
    "/validate", response_model=AnswerValidationResponse, status_code=status.HTTP_200_OK
)
def validate_answer(
    request: AnswerValidateRequest,
    use_case: QuizAnswerUseCase = Depends(inject_use_case(container.quiz_answer_use_case)),
) -> AnswerValidationResponse:
    """Grade a typed answer against the given accepted answers."""
    result = use_case.validate(request.user_answer, request.valid_answers).result
    return AnswerValidationResponse(
        is_correct=result.is_correct,
        similarity=result.similarity,
        feedback=result.feedback,
    )


@router.post("/check", response_model=AnswerCheckResponse, status_code=status.HTTP_200_OK)
async def check_answer(
    request: AnswerCheckRequest,
    use_case: QuizAnswerUseCase = Depends(inject_use_case(container.quiz_answer_use_case)),
) -> AnswerCheckResponse:
    """
    Grade a typed answer for a flashcard.

    The card's translation is expanded with translated synonyms of the
    source word before grading.
    """
    try:
        check = await use_case.check_answer(
            user_answer=request.user_answer,
            source_word=request.source_word,
            translation=request.translation,
            source_lang=request.source_lang,
            target_lang=request.target_lang,
        )
        return AnswerCheckResponse(
            is_correct=check.result.is_correct,
            similarity=check.result.similarity,
            feedback=check.result.feedback,
            valid_answers=check.valid_answers,
        )
    except (LexicardError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_check_answer",
            source_word=request.source_word,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
