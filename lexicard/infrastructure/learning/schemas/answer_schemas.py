"""Pydantic schemas for answer validation requests."""

from pydantic import BaseModel, Field

from lexicard.infrastructure.learning.schemas.language import (
    LanguageCode,
    default_source_lang,
    default_target_lang,
)


class AnswerValidateRequest(BaseModel):
    """Schema for grading an answer against caller-supplied answers."""

    user_answer: str = Field(..., description="Text typed by the user")
    valid_answers: list[str] = Field(
        ..., min_length=1, description="Accepted answers, preferred answer first"
    )


class AnswerValidationResponse(BaseModel):
    """Schema for a grading result."""

    is_correct: bool = Field(..., description="Whether the answer is accepted")
    similarity: float = Field(..., ge=0, le=100, description="Best similarity, 0-100")
    feedback: str | None = Field(None, description="Explanation when accepted inexactly")


class AnswerCheckRequest(BaseModel):
    """Schema for grading an answer for a flashcard with synonym expansion."""

    user_answer: str = Field(..., description="Text typed by the user")
    source_word: str = Field(..., min_length=1, description="Word shown on the card")
    translation: str = Field(..., min_length=1, description="Canonical translation")
    source_lang: LanguageCode = Field(default_factory=default_source_lang)
    target_lang: LanguageCode = Field(default_factory=default_target_lang)


class AnswerCheckResponse(AnswerValidationResponse):
    """Schema for a grading result with the answers that were accepted."""

    valid_answers: list[str] = Field(..., description="Answers the grader accepted")


class ValidTranslationsRequest(BaseModel):
    """Schema for expanding a card's accepted translations."""

    source_word: str = Field(..., min_length=1, description="Word shown on the card")
    translation: str = Field(..., min_length=1, description="Canonical translation")
    source_lang: LanguageCode = Field(default_factory=default_source_lang)
    target_lang: LanguageCode = Field(default_factory=default_target_lang)


class ValidTranslationsResponse(BaseModel):
    """Schema for a card's accepted translations."""

    valid_translations: list[str] = Field(..., description="Canonical translation first")
