from .answer_schemas import (
    AnswerCheckRequest,
    AnswerCheckResponse,
    AnswerValidateRequest,
    AnswerValidationResponse,
    ValidTranslationsRequest,
    ValidTranslationsResponse,
)
from .word_schemas import (
    InputExamplesResponse,
    WordParseRequest,
    WordParseResponse,
    WordTranslateRequest,
    WordTranslateResponse,
    WordTranslationItem,
)

__all__ = [
    "AnswerCheckRequest",
    "AnswerCheckResponse",
    "AnswerValidateRequest",
    "AnswerValidationResponse",
    "InputExamplesResponse",
    "ValidTranslationsRequest",
    "ValidTranslationsResponse",
    "WordParseRequest",
    "WordParseResponse",
    "WordTranslateRequest",
    "WordTranslateResponse",
    "WordTranslationItem",
]
