"""
Exceptions raised by the HubSpot client.

Call-time failures derive from `HubspotError`. Construction-time validation
failures derive from `HubspotBuilderError` and are never raised by a request.
"""

from __future__ import annotations

from typing import Any


class HubspotError(Exception):
    """Base class for errors raised while performing a request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class JsonError(HubspotError):
    """A request body could not be encoded, or a response body could not be decoded."""


class ResponseDecodeError(HubspotError):
    """The response body was not valid UTF-8 text."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpError(HubspotError):
    """Transport-level failure (connection, TLS, DNS, timeout)."""

    def __init__(self, message: str, *, method: str, url: str) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class HubspotServiceError(HubspotError):
    """
    HubSpot answered with a non-success status.

    When the body matched HubSpot's structured error shape, `category` and
    `context` are populated and `message` is formatted as
    ``"{category}: {message}, {context}"``. Otherwise `message` is the raw body.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str,
        category: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.category = category
        self.context = context


# =============================================================================
# Construction errors
# =============================================================================


class HubspotBuilderError(Exception):
    """A required client option was not provided."""

    field_name: str = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or f"Missing required option: {self.field_name}")


class MissingDomainError(HubspotBuilderError):
    field_name = "domain"


class MissingTokenError(HubspotBuilderError):
    field_name = "token"


class MissingPortalIdError(HubspotBuilderError):
    field_name = "portal_id"
