"""Use case for grading a quiz answer against an expanded answer set."""

import structlog

from lexicard.application.learning.services.synonym_expansion_service import (
    SynonymExpansionService,
)
from lexicard.application.learning.use_cases.dtos import AnswerCheck
from lexicard.domain.learning.services.answer_validator import AnswerValidator

logger = structlog.get_logger(__name__)


class QuizAnswerUseCase:
    """Use case for checking typed answers during a quiz."""

    def __init__(
        self,
        synonym_expansion_service: SynonymExpansionService,
        answer_validator: AnswerValidator,
    ) -> None:
        self.synonym_expansion_service = synonym_expansion_service
        self.answer_validator = answer_validator

    async def check_answer(
        self,
        user_answer: str,
        source_word: str,
        translation: str,
        source_lang: str,
        target_lang: str,
    ) -> AnswerCheck:
        """
        Grade a typed answer for one flashcard.

        Args:
            user_answer: Text typed by the user
            source_word: Word shown on the card
            translation: Canonical translation stored on the card
            source_lang: Language code of source_word
            target_lang: Language code of translation

        Returns:
            AnswerCheck with the grading result and the accepted answers
        """
        valid_answers = await self.synonym_expansion_service.get_all_valid_translations(
            source_word, translation, source_lang, target_lang
        )
        result = self.answer_validator.validate(user_answer, valid_answers)

        logger.info(
            "quiz_answer_checked",
            source_word=source_word,
            is_correct=result.is_correct,
            similarity=round(result.similarity, 1),
            candidates=len(valid_answers),
        )
        return AnswerCheck(result=result, valid_answers=valid_answers)

    def validate(self, user_answer: str, valid_answers: list[str]) -> AnswerCheck:
        """Grade a typed answer against answers supplied by the caller."""
        result = self.answer_validator.validate(user_answer, valid_answers)
        return AnswerCheck(result=result, valid_answers=valid_answers)
