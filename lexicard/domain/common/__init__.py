"""Shared domain building blocks."""

from .exceptions import DomainError, ValidationError

__all__ = ["DomainError", "ValidationError"]
