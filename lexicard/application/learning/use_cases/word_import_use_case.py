"""Use case for turning pasted text into translated vocabulary."""

import asyncio

import structlog

from lexicard.application.learning.protocols import TranslationServiceProtocol
from lexicard.application.learning.use_cases.dtos import WordTranslation
from lexicard.constants import MAX_BULK_WORDS
from lexicard.domain.learning.services.word_parser import WordParser
from lexicard.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class WordImportUseCase:
    """Use case for parsing and batch-translating vocabulary input."""

    def __init__(
        self,
        translation_service: TranslationServiceProtocol,
        word_parser: WordParser,
        delay_seconds: float = 0.2,
        max_words: int = MAX_BULK_WORDS,
    ) -> None:
        self.translation_service = translation_service
        self.word_parser = word_parser
        self.delay_seconds = delay_seconds
        self.max_words = max_words

    def parse(self, text: str) -> list[str]:
        """Split pasted text into vocabulary tokens."""
        return self.word_parser.parse(text)

    async def translate_bulk(
        self, words: list[str], source_lang: str, target_lang: str
    ) -> list[WordTranslation]:
        """
        Translate words one at a time.

        Requests are spaced by ``delay_seconds`` to stay under the free
        translation providers' rate limits. A word whose translation fails
        maps to itself.

        Raises:
            ValidationError: If more than ``max_words`` words are given
        """
        if len(words) > self.max_words:
            raise ValidationError(
                f"Too many words to translate at once ({len(words)}), maximum is {self.max_words}"
            )

        results: list[WordTranslation] = []
        for index, raw_word in enumerate(words):
            word = raw_word.strip()
            if index and self.delay_seconds:
                await asyncio.sleep(self.delay_seconds)
            try:
                translation = await self.translation_service.translate(
                    word, source_lang, target_lang
                )
            except Exception as e:
                logger.warning("bulk_translation_failed", word=word, error=str(e))
                translation = word
            results.append(WordTranslation(word=word, translation=translation))

        logger.info(
            "bulk_translation_completed",
            source_lang=source_lang,
            target_lang=target_lang,
            word_count=len(results),
        )
        return results

    async def import_text(
        self, text: str, source_lang: str, target_lang: str
    ) -> list[WordTranslation]:
        """Parse pasted text and translate every token."""
        return await self.translate_bulk(self.parse(text), source_lang, target_lang)
