from .quiz_answer_use_case import QuizAnswerUseCase
from .word_import_use_case import WordImportUseCase

__all__ = ["QuizAnswerUseCase", "WordImportUseCase"]
