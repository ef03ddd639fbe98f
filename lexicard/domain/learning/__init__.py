"""
Learning bounded context - Domain layer.

This context handles vocabulary quiz features:
- Splitting pasted text into vocabulary items
- Grading typed answers against a set of accepted translations

Value objects:
- ValidationResult: Outcome of grading one answer
- SynonymCacheKey: Identity of a cached valid-answer set
- MatchThresholds: Tunable grading thresholds
"""
