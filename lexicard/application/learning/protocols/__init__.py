from .cache import CacheProtocol
from .thesaurus_service import ThesaurusServiceProtocol
from .translation_service import TranslationServiceProtocol

__all__ = [
    "CacheProtocol",
    "ThesaurusServiceProtocol",
    "TranslationServiceProtocol",
]
