from typing import Protocol


class ThesaurusServiceProtocol(Protocol):
    async def fetch_synonyms(self, word: str) -> list[str]: ...
