"""Shared field types for language-aware requests."""

from typing import Annotated

from pydantic import AfterValidator, Field

from lexicard.core import container

LanguageCode = Annotated[
    str,
    Field(
        min_length=2,
        max_length=10,
        pattern=r"^[A-Za-z0-9-]+$",
        description="Language code, e.g. 'en' or 'pt-BR'",
    ),
    AfterValidator(str.lower),
]


def default_source_lang() -> str:
    return container.settings().DEFAULT_SOURCE_LANG


def default_target_lang() -> str:
    return container.settings().DEFAULT_TARGET_LANG
