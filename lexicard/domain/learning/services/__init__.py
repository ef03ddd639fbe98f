from .answer_validator import AnswerValidator, validate_answer
from .text_similarity import (
    calculate_similarity,
    levenshtein_distance,
    normalize_text,
)
from .word_parser import INPUT_EXAMPLES, WordParser, parse_words

__all__ = [
    "INPUT_EXAMPLES",
    "AnswerValidator",
    "WordParser",
    "calculate_similarity",
    "levenshtein_distance",
    "normalize_text",
    "parse_words",
    "validate_answer",
]
