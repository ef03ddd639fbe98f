"""Tests for valid translation API endpoints."""

from unittest.mock import AsyncMock

from fastapi import status
from fastapi.testclient import TestClient


def _payload(**overrides: str) -> dict[str, str]:
    payload = {
        "source_word": "happy",
        "translation": "Счастливый",
        "source_lang": "en",
        "target_lang": "ru",
    }
    payload.update(overrides)
    return payload


class TestValidTranslations:
    def test_expanded_with_synonyms(
        self,
        client: TestClient,
        thesaurus_service: AsyncMock,
        translation_service: AsyncMock,
    ) -> None:
        thesaurus_service.fetch_synonyms.return_value = ["glad", "joyful"]
        translations = {"glad": "счастливый", "joyful": "счастливые"}
        translation_service.translate.side_effect = (
            lambda text, source_lang, target_lang: translations[text]
        )

        response = client.post("/api/v1/translations/valid", json=_payload())

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"valid_translations": ["счастливый", "счастливые"]}

    def test_non_english_source_not_expanded(
        self, client: TestClient, thesaurus_service: AsyncMock
    ) -> None:
        response = client.post(
            "/api/v1/translations/valid",
            json=_payload(source_word="maison", translation="House", source_lang="fr"),
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"valid_translations": ["house"]}
        thesaurus_service.fetch_synonyms.assert_not_awaited()

    def test_repeated_request_served_from_cache(
        self, client: TestClient, thesaurus_service: AsyncMock
    ) -> None:
        first = client.post("/api/v1/translations/valid", json=_payload())
        second = client.post("/api/v1/translations/valid", json=_payload())

        assert first.json() == second.json() == {"valid_translations": ["счастливый"]}
        assert thesaurus_service.fetch_synonyms.await_count == 1

    def test_empty_source_word_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/translations/valid", json=_payload(source_word=""))

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
