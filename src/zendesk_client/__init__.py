"""Zendesk client library.

This package provides Python abstractions over the Zendesk REST API v2,
currently covering the ticket merge endpoint.
"""

from .api_wrapper import APIWrapper
from .auth import Authenticator, Credentials
from .errors import (
    ZendeskError,
    InvalidCredentialsError,
    RequestError,
    AuthenticationError,
    TicketNotFoundError,
    NetworkError,
    ParseError,
)
from .models import HTTPResponse, MergedTicket, MergeRequest
from .transport import RequestsTransport, Transport

__all__ = [
    "APIWrapper",
    "Authenticator",
    "Credentials",
    "ZendeskError",
    "InvalidCredentialsError",
    "RequestError",
    "AuthenticationError",
    "TicketNotFoundError",
    "NetworkError",
    "ParseError",
    "HTTPResponse",
    "MergedTicket",
    "MergeRequest",
    "RequestsTransport",
    "Transport",
]
