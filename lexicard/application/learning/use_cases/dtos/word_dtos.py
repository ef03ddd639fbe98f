"""DTOs for word import use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WordTranslation:
    """A parsed word with its machine translation."""

    word: str
    translation: str
