"""DTOs for learning use cases."""

from lexicard.application.learning.use_cases.dtos.quiz_dtos import AnswerCheck
from lexicard.application.learning.use_cases.dtos.word_dtos import WordTranslation

__all__ = ["AnswerCheck", "WordTranslation"]
