from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[], T]:
    """
    Create a FastAPI dependency for a container provider.

    The provider is resolved per request, so overrides applied to the
    container (for example in tests) take effect immediately.
    """

    def dependency() -> T:
        return provider()

    return dependency
