"""Value objects for the learning domain."""

from dataclasses import dataclass

from lexicard.constants import (
    HIGH_CONFIDENCE_THRESHOLD,
    MIN_LENGTH_RATIO,
    SYNONYM_THRESHOLD,
)
from lexicard.domain.common.exceptions import ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of grading a typed answer."""

    is_correct: bool
    similarity: float
    feedback: str | None = None


@dataclass(frozen=True)
class MatchThresholds:
    """
    Tunable grading thresholds.

    Similarities are on a 0-100 scale; ``length_ratio`` is 0-1.
    Defaults are the empirically tuned values from ``lexicard.constants``.
    """

    high_confidence: float = HIGH_CONFIDENCE_THRESHOLD
    synonym: float = SYNONYM_THRESHOLD
    length_ratio: float = MIN_LENGTH_RATIO

    def __post_init__(self) -> None:
        for name in ("high_confidence", "synonym"):
            value = getattr(self, name)
            if not 0 <= value <= 100:  # noqa: PLR2004
                raise ValidationError("Similarity threshold must be within 0-100", name, value)
        if not 0 <= self.length_ratio <= 1:
            raise ValidationError(
                "Length ratio must be within 0-1", "length_ratio", self.length_ratio
            )


@dataclass(frozen=True)
class SynonymCacheKey:
    """
    Identity of a cached valid-answer set.

    One entry exists per (source word, source language, target language).
    """

    source_word: str
    source_lang: str
    target_lang: str

    def __post_init__(self) -> None:
        if not self.source_word:
            raise ValidationError("Source word cannot be empty", "source_word")
        if not self.source_lang:
            raise ValidationError("Source language cannot be empty", "source_lang")
        if not self.target_lang:
            raise ValidationError("Target language cannot be empty", "target_lang")

    def to_primitive(self) -> str:
        """Serialise to the string key used by the cache backends."""
        return f"synonyms:{self.source_word}_{self.source_lang}_{self.target_lang}"

    def __str__(self) -> str:
        return self.to_primitive()
