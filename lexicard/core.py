import httpx
from dependency_injector import containers, providers

from lexicard.application.learning.services.synonym_expansion_service import (
    SynonymExpansionService,
)
from lexicard.application.learning.use_cases.quiz_answer_use_case import QuizAnswerUseCase
from lexicard.application.learning.use_cases.word_import_use_case import WordImportUseCase
from lexicard.config import Settings, get_settings
from lexicard.domain.learning.services.answer_validator import AnswerValidator
from lexicard.domain.learning.services.word_parser import WordParser
from lexicard.infrastructure.cache import MemoryCache, RedisCache, TieredCache
from lexicard.infrastructure.learning.services import (
    ApiNinjasThesaurusService,
    HttpTranslationService,
)


def build_durable_cache(settings: Settings) -> RedisCache | None:
    """Create the Redis tier when REDIS_URL is configured."""
    if not settings.REDIS_URL:
        return None
    return RedisCache.from_url(settings.REDIS_URL)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # HTTP clients for external collaborators
    translation_http_client = providers.Singleton(
        httpx.AsyncClient,
        timeout=settings.provided.TRANSLATION_TIMEOUT_SECONDS,
    )
    thesaurus_http_client = providers.Singleton(
        httpx.AsyncClient,
        timeout=settings.provided.THESAURUS_TIMEOUT_SECONDS,
    )

    # External service adapters
    translation_service = providers.Singleton(
        HttpTranslationService,
        client=translation_http_client,
        google_url=settings.provided.GOOGLE_TRANSLATE_URL,
        mymemory_url=settings.provided.MYMEMORY_URL,
    )
    thesaurus_service = providers.Singleton(
        ApiNinjasThesaurusService,
        client=thesaurus_http_client,
        api_key=settings.provided.NINJAS_API_KEY,
        base_url=settings.provided.THESAURUS_BASE_URL,
        max_synonyms=settings.provided.MAX_SYNONYMS,
    )

    # Caches (process-wide)
    memory_cache = providers.Singleton(MemoryCache)
    durable_cache = providers.Singleton(build_durable_cache, settings=settings)
    synonym_cache = providers.Singleton(TieredCache, local=memory_cache, durable=durable_cache)

    # Domain services (pure domain logic, no I/O)
    word_parser = providers.Factory(WordParser)
    answer_validator = providers.Factory(AnswerValidator)

    # Application services
    synonym_expansion_service = providers.Singleton(
        SynonymExpansionService,
        translation_service=translation_service,
        thesaurus_service=thesaurus_service,
        cache=synonym_cache,
        cache_ttl_seconds=settings.provided.SYNONYM_CACHE_TTL_SECONDS,
        max_synonyms=settings.provided.MAX_SYNONYMS,
    )

    # Learning use cases
    word_import_use_case = providers.Factory(
        WordImportUseCase,
        translation_service=translation_service,
        word_parser=word_parser,
        delay_seconds=settings.provided.BULK_TRANSLATION_DELAY_SECONDS,
    )
    quiz_answer_use_case = providers.Factory(
        QuizAnswerUseCase,
        synonym_expansion_service=synonym_expansion_service,
        answer_validator=answer_validator,
    )


# Initialize container
container = Container()
