"""Machine translation over free public HTTP endpoints."""

from typing import Any

import httpx
import structlog

logger = structlog.get_logger(__name__)

GOOGLE_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"
MYMEMORY_URL = "https://api.mymemory.translated.net/get"

_MIN_MATCH_SCORE = 0.9
_MIN_QUALITY = 70


class HttpTranslationService:
    """
    Best-effort translator.

    Tries the Google ``translate_a/single`` endpoint first and falls back to
    MyMemory, preferring its highest-quality translation memory match. When
    neither yields a usable translation the input is returned unchanged.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        google_url: str = GOOGLE_TRANSLATE_URL,
        mymemory_url: str = MYMEMORY_URL,
    ) -> None:
        self._client = client
        self.google_url = google_url
        self.mymemory_url = mymemory_url

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate text, returning it unchanged when no provider succeeds."""
        translated = await self._translate_google(text, source_lang, target_lang)
        if translated:
            return translated

        translated = await self._translate_mymemory(text, source_lang, target_lang)
        if translated:
            return translated

        logger.warning("no_translation_found", text=text, source=source_lang, target=target_lang)
        return text

    async def _translate_google(self, text: str, source_lang: str, target_lang: str) -> str | None:
        params = {"client": "gtx", "sl": source_lang, "tl": target_lang, "dt": "t", "q": text}
        try:
            response = await self._client.get(self.google_url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.info("google_translate_failed", text=text, error=str(e))
            return None

        # Response shape: [[["translated", "original", null, null, 3]], ...]
        try:
            translated = data[0][0][0]
        except (IndexError, KeyError, TypeError):
            return None

        if isinstance(translated, str) and translated and not _same_text(translated, text):
            return translated
        return None

    async def _translate_mymemory(
        self, text: str, source_lang: str, target_lang: str
    ) -> str | None:
        params = {"q": text, "langpair": f"{source_lang}|{target_lang}"}
        try:
            response = await self._client.get(self.mymemory_url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("mymemory_translate_failed", text=text, error=str(e))
            return None

        if not isinstance(data, dict) or data.get("responseStatus") != 200:  # noqa: PLR2004
            return None

        best = _best_match(data.get("matches") or [], text)
        if best:
            return best

        translated = ((data.get("responseData") or {}).get("translatedText") or "").strip()
        if translated and not _same_text(translated, text):
            return translated
        return None


def _best_match(matches: list[dict[str, Any]], text: str) -> str | None:
    """Pick the highest scoring translation memory match of good quality."""
    good: list[tuple[float, str]] = []
    for match in matches:
        translation = (match.get("translation") or "").strip()
        if not translation or _same_text(translation, text):
            continue
        try:
            score = float(match.get("match", 0))
            quality = int(match.get("quality", 0))
        except (TypeError, ValueError):
            continue
        if score >= _MIN_MATCH_SCORE and quality >= _MIN_QUALITY:
            good.append((score * 0.6 + quality / 100 * 0.4, translation))

    if not good:
        return None
    return max(good, key=lambda item: item[0])[1]


def _same_text(first: str, second: str) -> bool:
    return first.lower() == second.lower()
