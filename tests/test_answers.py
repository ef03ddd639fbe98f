"""Tests for answer grading API endpoints."""

from unittest.mock import AsyncMock

from fastapi import status
from fastapi.testclient import TestClient

from lexicard.constants import FEEDBACK_ALTERNATIVE_FORM, FEEDBACK_SYNONYM


class TestValidateAnswer:
    def test_exact_match(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/answers/validate",
            json={"user_answer": "  Hello! ", "valid_answers": ["hello"]},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"is_correct": True, "similarity": 100.0, "feedback": None}

    def test_close_answer(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/answers/validate",
            json={"user_answer": "computr", "valid_answers": ["computer"]},
        )

        data = response.json()
        assert data["is_correct"] is True
        assert data["similarity"] == 87.5
        assert data["feedback"] == FEEDBACK_SYNONYM

    def test_wrong_answer(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/answers/validate",
            json={"user_answer": "cat", "valid_answers": ["category"]},
        )

        data = response.json()
        assert data["is_correct"] is False
        assert data["feedback"] is None

    def test_empty_valid_answers_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/answers/validate", json={"user_answer": "hello", "valid_answers": []}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestCheckAnswer:
    def test_synonym_translation_accepted(
        self,
        client: TestClient,
        thesaurus_service: AsyncMock,
        translation_service: AsyncMock,
    ) -> None:
        thesaurus_service.fetch_synonyms.return_value = ["joyful"]
        translation_service.translate.side_effect = None
        translation_service.translate.return_value = "glücklich"

        response = client.post(
            "/api/v1/answers/check",
            json={
                "user_answer": "glücklich",
                "source_word": "happy",
                "translation": "gluecklich",
                "source_lang": "en",
                "target_lang": "de",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["is_correct"] is True
        assert data["similarity"] == 100.0
        assert data["valid_answers"] == ["gluecklich", "glücklich"]

    def test_inflected_answer(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/answers/check",
            json={
                "user_answer": "houses",
                "source_word": "Häuser",
                "translation": "house",
                "source_lang": "de",
                "target_lang": "en",
            },
        )

        data = response.json()
        assert data["is_correct"] is True
        assert data["feedback"] == FEEDBACK_ALTERNATIVE_FORM
        assert data["valid_answers"] == ["house"]

    def test_missing_translation_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/answers/check", json={"user_answer": "x", "source_word": "happy"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
