"""English synonym lookup via the API Ninjas thesaurus."""

import httpx
import structlog

from lexicard.constants import MAX_SYNONYMS

logger = structlog.get_logger(__name__)

API_NINJAS_BASE_URL = "https://api.api-ninjas.com"


class ApiNinjasThesaurusService:
    """
    Thesaurus client.

    Any failure, including missing credentials, yields an empty list.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str | None,
        base_url: str = API_NINJAS_BASE_URL,
        max_synonyms: int = MAX_SYNONYMS,
    ) -> None:
        self._client = client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.max_synonyms = max_synonyms

    async def fetch_synonyms(self, word: str) -> list[str]:
        """Get up to ``max_synonyms`` synonyms of an English word."""
        if not self.api_key:
            logger.warning("thesaurus_api_key_missing", word=word)
            return []

        try:
            response = await self._client.get(
                f"{self.base_url}/v1/thesaurus",
                params={"word": word},
                headers={"X-Api-Key": self.api_key},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "thesaurus_request_failed",
                word=word,
                status_code=e.response.status_code,
            )
            return []
        except (httpx.HTTPError, ValueError) as e:
            logger.error("thesaurus_request_failed", word=word, error=str(e))
            return []

        # Response shape: {"word": "happy", "synonyms": ["joyful", ...], "antonyms": [...]}
        synonyms = data.get("synonyms") if isinstance(data, dict) else None
        if not isinstance(synonyms, list):
            return []

        lowered = word.lower()
        filtered = [s for s in synonyms if isinstance(s, str) and s and s.lower() != lowered]
        logger.debug("synonyms_fetched", word=word, count=len(filtered))
        return filtered[: self.max_synonyms]
