"""Pydantic schemas for word parsing and translation requests."""

from pydantic import BaseModel, Field

from lexicard.infrastructure.learning.schemas.language import (
    LanguageCode,
    default_source_lang,
    default_target_lang,
)


class WordParseRequest(BaseModel):
    """Schema for parsing pasted vocabulary text."""

    text: str = Field(..., description="Raw text containing one or more words or phrases")


class WordParseResponse(BaseModel):
    """Schema for parsed vocabulary tokens."""

    words: list[str] = Field(..., description="Tokens in first-seen order without duplicates")


class WordTranslateRequest(BaseModel):
    """Schema for parsing and translating pasted vocabulary text."""

    text: str = Field(..., description="Raw text containing one or more words or phrases")
    source_lang: LanguageCode = Field(default_factory=default_source_lang)
    target_lang: LanguageCode = Field(default_factory=default_target_lang)


class WordTranslationItem(BaseModel):
    """Schema for one translated word."""

    word: str
    translation: str

    model_config = {"from_attributes": True}


class WordTranslateResponse(BaseModel):
    """Schema for translated vocabulary."""

    translations: list[WordTranslationItem] = Field(..., description="Translated tokens")


class InputExamplesResponse(BaseModel):
    """Schema for supported input format samples."""

    examples: dict[str, str] = Field(..., description="Sample input keyed by format name")
