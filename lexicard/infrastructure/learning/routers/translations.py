"""API routes for a flashcard's accepted translations."""

from fastapi import APIRouter, Depends, status

from lexicard.application.learning.services.synonym_expansion_service import (
    SynonymExpansionService,
)
from lexicard.core import container
from lexicard.infrastructure.common.di import inject_use_case
from lexicard.infrastructure.learning.schemas import (
    ValidTranslationsRequest,
    ValidTranslationsResponse,
)

router = APIRouter(prefix="/translations", tags=["translations"])


@router.post("/valid", response_model=ValidTranslationsResponse, status_code=status.HTTP_200_OK)
async def get_valid_translations(
    request: ValidTranslationsRequest,
    service: SynonymExpansionService = Depends(
        inject_use_case(container.synonym_expansion_service)
    ),
) -> ValidTranslationsResponse:
    """
    Get every translation a quiz accepts for a word.

    Synonym expansion only applies to English source words; other languages
    accept the canonical translation alone.
    """
    valid = await service.get_all_valid_translations(
        request.source_word, request.translation, request.source_lang, request.target_lang
    )
    return ValidTranslationsResponse(valid_translations=valid)
