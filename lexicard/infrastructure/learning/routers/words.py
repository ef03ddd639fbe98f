"""API routes for parsing and translating vocabulary input."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from lexicard.application.learning.use_cases.word_import_use_case import WordImportUseCase
from lexicard.core import container
from lexicard.domain.common.exceptions import DomainError
from lexicard.domain.learning.services.word_parser import INPUT_EXAMPLES
from lexicard.exceptions import LexicardError
from lexicard.infrastructure.common.di import inject_use_case
from lexicard.infrastructure.learning.schemas import (
    InputExamplesResponse,
    WordParseRequest,
    WordParseResponse,
    WordTranslateRequest,
    WordTranslateResponse,
    WordTranslationItem,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


@router.post("/parse", response_model=WordParseResponse, status_code=status.HTTP_200_OK)
def parse_words(
    request: WordParseRequest,
    use_case: WordImportUseCase = Depends(inject_use_case(container.word_import_use_case)),
) -> WordParseResponse:
    """
    Split pasted text into vocabulary items.

    Accepts newline, comma, dot or space separated words and phrases.
    """
    return WordParseResponse(words=use_case.parse(request.text))


@router.get("/examples", response_model=InputExamplesResponse)
async def get_input_examples() -> InputExamplesResponse:
    """Get sample input for each supported format."""
    return InputExamplesResponse(examples=dict(INPUT_EXAMPLES))


@router.post("/translate", response_model=WordTranslateResponse, status_code=status.HTTP_200_OK)
async def translate_words(
    request: WordTranslateRequest,
    use_case: WordImportUseCase = Depends(inject_use_case(container.word_import_use_case)),
) -> WordTranslateResponse:
    """
    Split pasted text into vocabulary items and translate each one.

    Words that cannot be translated are returned as their own translation.
    """
    try:
        translations = await use_case.import_text(
            request.text, request.source_lang, request.target_lang
        )
        return WordTranslateResponse(
            translations=[
                WordTranslationItem(word=t.word, translation=t.translation) for t in translations
            ]
        )
    except (LexicardError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_translate_words", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
