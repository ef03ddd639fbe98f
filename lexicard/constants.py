"""
Application constants.

Answer-grading thresholds are empirically tuned against the Levenshtein
similarity in ``lexicard.domain.learning.services.text_similarity``.
Change them together with the tests that pin their behaviour.
"""

# Similarity (0-100) at or above which a typo is forgiven.
HIGH_CONFIDENCE_THRESHOLD = 90.0

# Looser similarity tier used once the valid-answer set includes synonyms.
SYNONYM_THRESHOLD = 85.0

# Minimum shorter/longer length ratio for the substring rule.
MIN_LENGTH_RATIO = 0.7

# Minimum similarity between a synonym's translation and the canonical one.
RELEVANCE_THRESHOLD = 50.0

# Synonym expansion
MAX_SYNONYMS = 10
SYNONYM_CACHE_TTL_SECONDS = 86400
SYNONYM_SOURCE_LANG = "en"

# Word import
MAX_BULK_WORDS = 200

FEEDBACK_MINOR_SPELLING = "Close enough! Minor spelling difference."
FEEDBACK_ALTERNATIVE_FORM = "Correct! (Alternative form accepted)"
FEEDBACK_SYNONYM = "Correct! (Synonym accepted)"