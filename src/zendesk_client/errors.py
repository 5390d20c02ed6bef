"""Typed exception hierarchy for Zendesk-related errors.

This module defines all custom exceptions used by the Zendesk client library.
All exceptions inherit from ZendeskError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Any, Optional


class ZendeskError(Exception):
    """Base exception for all Zendesk client errors."""
    pass


class InvalidCredentialsError(ZendeskError):
    """Raised when API credentials are missing from the configuration."""

    def __init__(self, user: str, endpoint: str):
        super().__init__(
            f"API credentials are invalid (user: {user}, endpoint: {endpoint})"
        )
        self.user = user
        self.endpoint = endpoint


class RequestError(ZendeskError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the server
        body: Parsed JSON error body, or the raw text if it was not JSON
        method: HTTP method of the failed request
        url: URL of the failed request
    """

    def __init__(
        self,
        status_code: int,
        body: Any = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        message = f"Zendesk API returned HTTP {status_code}"
        if method and url:
            message += f" for {method} {url}"
        detail = _describe_body(body)
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url


class AuthenticationError(RequestError):
    """Raised on 401/403 responses."""
    pass


class TicketNotFoundError(RequestError):
    """Raised on 404 responses (unknown target or source ticket)."""
    pass


class NetworkError(ZendeskError):
    """Raised when the API cannot be reached or the request times out."""

    def __init__(self, endpoint: str, reason: Optional[str] = None):
        message = f"API is not reachable at {endpoint}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.endpoint = endpoint
        self.reason = reason


class ParseError(ZendeskError):
    """Raised when a response body is not valid JSON or has an unexpected shape."""

    def __init__(self, reason: str):
        super().__init__(f"Unexpected response from Zendesk API: {reason}")
        self.reason = reason


def _describe_body(body: Any) -> str:
    # Zendesk error bodies look like {"error": "...", "description": "..."}
    if isinstance(body, dict):
        parts = [str(body[key]) for key in ('error', 'description') if body.get(key)]
        return " - ".join(parts)
    if isinstance(body, str):
        return body.strip()[:200]
    return ""
