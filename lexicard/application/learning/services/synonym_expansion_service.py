"""Application service that widens the set of accepted quiz answers."""

import asyncio

import structlog

from lexicard.application.learning.protocols import (
    CacheProtocol,
    ThesaurusServiceProtocol,
    TranslationServiceProtocol,
)
from lexicard.constants import (
    MAX_SYNONYMS,
    RELEVANCE_THRESHOLD,
    SYNONYM_CACHE_TTL_SECONDS,
    SYNONYM_SOURCE_LANG,
)
from lexicard.domain.learning.services.text_similarity import (
    calculate_similarity,
    contains_either,
)
from lexicard.domain.learning.value_objects import SynonymCacheKey

logger = structlog.get_logger(__name__)


class SynonymExpansionService:
    """
    Builds the valid-answer set for a flashcard.

    Synonyms of the source word are looked up, translated concurrently and
    kept only when their translation stays close to the canonical one.
    Synonym lookup depends on an English thesaurus, so only English source
    words are expanded. External failures degrade to accepting the canonical
    translation alone.
    """

    def __init__(
        self,
        translation_service: TranslationServiceProtocol,
        thesaurus_service: ThesaurusServiceProtocol,
        cache: CacheProtocol,
        cache_ttl_seconds: int = SYNONYM_CACHE_TTL_SECONDS,
        max_synonyms: int = MAX_SYNONYMS,
        relevance_threshold: float = RELEVANCE_THRESHOLD,
    ) -> None:
        self.translation_service = translation_service
        self.thesaurus_service = thesaurus_service
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds
        self.max_synonyms = max_synonyms
        self.relevance_threshold = relevance_threshold

    async def get_all_valid_translations(
        self,
        source_word: str,
        original_translation: str,
        source_lang: str = "en",
        target_lang: str = "ru",
    ) -> list[str]:
        """
        Get every translation a quiz should accept for a word.

        Args:
            source_word: Word shown on the flashcard
            original_translation: Canonical translation of the word
            source_lang: Language code of source_word
            target_lang: Language code of original_translation

        Returns:
            Lowercased translations, canonical first, without duplicates
        """
        original = original_translation.lower().strip()
        if not (source_word and source_lang and target_lang):
            return [original]

        cache_key = SynonymCacheKey(source_word, source_lang, target_lang).to_primitive()

        cached = await self.cache.get(cache_key)
        if cached:
            logger.debug("synonyms_cache_hit", source_word=source_word, cache_key=cache_key)
            return cached

        valid_translations = [original]
        if source_lang == SYNONYM_SOURCE_LANG:
            try:
                valid_translations.extend(
                    await self._expand(source_word, original, source_lang, target_lang)
                )
            except Exception as e:
                logger.warning(
                    "synonym_expansion_failed",
                    source_word=source_word,
                    error=str(e),
                    exc_info=True,
                )
        else:
            logger.debug("synonym_expansion_skipped", source_word=source_word, lang=source_lang)

        result = _deduplicate(valid_translations)
        await self.cache.set(cache_key, result, self.cache_ttl_seconds)

        logger.info(
            "valid_translations_resolved",
            source_word=source_word,
            source_lang=source_lang,
            target_lang=target_lang,
            count=len(result),
        )
        return result

    async def clear_cache(self) -> None:
        """Drop cached valid-answer sets held in process."""
        await self.cache.clear()

    async def _expand(
        self, source_word: str, original: str, source_lang: str, target_lang: str
    ) -> list[str]:
        synonyms = await self._fetch_synonyms(source_word)
        if not synonyms:
            logger.debug("no_synonyms_found", source_word=source_word)
            return []

        results = await asyncio.gather(
            *(
                self.translation_service.translate(synonym, source_lang, target_lang)
                for synonym in synonyms
            ),
            return_exceptions=True,
        )

        accepted: list[str] = []
        for synonym, outcome in zip(synonyms, results, strict=True):
            if isinstance(outcome, BaseException):
                logger.debug("synonym_translation_failed", synonym=synonym, error=str(outcome))
                continue
            if not isinstance(outcome, str):
                logger.debug("synonym_translation_invalid", synonym=synonym)
                continue

            translation = outcome.lower().strip()
            if not translation:
                continue

            similarity = calculate_similarity(translation, original)
            if similarity >= self.relevance_threshold or contains_either(translation, original):
                accepted.append(translation)
            else:
                logger.debug(
                    "synonym_translation_rejected",
                    synonym=synonym,
                    translation=translation,
                    similarity=round(similarity, 1),
                )
        return accepted

    async def _fetch_synonyms(self, source_word: str) -> list[str]:
        synonyms = await self.thesaurus_service.fetch_synonyms(source_word)
        word = source_word.lower()
        return [s for s in synonyms if s and s.lower() != word][: self.max_synonyms]


def _deduplicate(translations: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for translation in translations:
        key = translation.strip().lower()
        if key not in seen:
            seen.add(key)
            unique.append(translation)
    return unique
