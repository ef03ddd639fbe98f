from .synonym_expansion_service import SynonymExpansionService

__all__ = ["SynonymExpansionService"]
