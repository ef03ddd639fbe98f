from typing import Protocol


class TranslationServiceProtocol(Protocol):
    async def translate(self, text: str, source_lang: str, target_lang: str) -> str: ...
