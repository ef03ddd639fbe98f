"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from lexicard.config import Settings
from lexicard.core import container
from lexicard.main import app


@pytest.fixture
def translation_service() -> AsyncMock:
    """Translation adapter double that echoes an upper-cased word."""
    service = AsyncMock()
    service.translate.side_effect = lambda text, source_lang, target_lang: text.upper()
    return service


@pytest.fixture
def thesaurus_service() -> AsyncMock:
    """Thesaurus adapter double with no synonyms."""
    service = AsyncMock()
    service.fetch_synonyms.return_value = []
    return service


@pytest.fixture
def client(
    translation_service: AsyncMock, thesaurus_service: AsyncMock
) -> Generator[TestClient, Any, None]:
    """Create a test client with external services replaced by mocks."""
    test_settings = Settings(ENVIRONMENT="test", BULK_TRANSLATION_DELAY_SECONDS=0, REDIS_URL=None)

    container.reset_singletons()
    container.settings.override(providers.Object(test_settings))
    container.translation_service.override(providers.Object(translation_service))
    container.thesaurus_service.override(providers.Object(thesaurus_service))
    container.durable_cache.override(providers.Object(None))

    with TestClient(app) as test_client:
        yield test_client

    container.reset_override()
    container.reset_singletons()
