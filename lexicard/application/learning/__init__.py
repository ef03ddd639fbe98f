"""
Learning bounded context - Application layer.

Orchestrates synonym expansion and word import over the translation,
thesaurus and cache ports.
"""
