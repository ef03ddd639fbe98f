from .thesaurus_service import ApiNinjasThesaurusService
from .translation_service import HttpTranslationService

__all__ = ["ApiNinjasThesaurusService", "HttpTranslationService"]
