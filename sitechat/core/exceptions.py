"""
Exception hierarchy for the sitechat service.

Routers map these onto HTTP statuses: ValidationError -> 400,
NotFoundError -> 404, anything else (UpstreamUnavailableError included) -> 500.
Each error carries a ``details`` dict that ends up in the response body.

Dependencies: None (pure domain layer)
System role: Shared error vocabulary across layers
"""

from typing import Any


class SiteChatException(Exception):
    """Base exception for all sitechat errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Args:
            message: Client-facing error message
            details: Extra context returned alongside the message
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ValidationError(SiteChatException):
    """A required request field is missing or a URL is not absolute."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(SiteChatException):
    """A fetched page produced no text."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, {"url": url} if url else None)


class UpstreamUnavailableError(SiteChatException):
    """An external collaborator (vector index, embeddings, chat model, website) failed."""


class VectorStoreError(UpstreamUnavailableError):
    """Upsert or similarity query failed, including the embedding call behind it."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class LLMError(UpstreamUnavailableError):
    """The chat model call failed."""


class FetchError(UpstreamUnavailableError):
    """The primary page fetch failed (network error or non-success status)."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None) -> None:
        details: dict[str, Any] = {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
