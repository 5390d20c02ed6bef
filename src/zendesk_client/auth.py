"""Authentication module for loading Zendesk credentials.

This module handles loading Zendesk API credentials from environment variables
using python-dotenv. It validates that all required credentials are present and
raises appropriate errors if any are missing.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import InvalidCredentialsError


class Credentials(NamedTuple):
    """Zendesk API credentials."""
    url: str
    user: str
    api_token: str


class Authenticator:
    """Loads and validates Zendesk credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged to prevent security risks.

    Environment variables:
        ZENDESK_SUBDOMAIN: Account subdomain (e.g., "acme" for acme.zendesk.com)
        ZENDESK_URL: Optional full base URL, takes precedence over the subdomain
        ZENDESK_USERNAME: Agent email address used with the API token
        ZENDESK_TOKEN: Zendesk API token

    Raises:
        InvalidCredentialsError: If any required credential is missing

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.url}")
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get Zendesk credentials from environment variables.

        Returns:
            Credentials: A named tuple containing url, user, and api_token

        Raises:
            InvalidCredentialsError: If any required credential is missing
        """
        url = _base_url(os.getenv('ZENDESK_URL'), os.getenv('ZENDESK_SUBDOMAIN'))
        user = os.getenv('ZENDESK_USERNAME')
        api_token = os.getenv('ZENDESK_TOKEN')

        if not url or not user or not api_token:
            raise InvalidCredentialsError(
                user=user if user else "unknown",
                endpoint=url if url else "unknown"
            )

        return Credentials(url=url, user=user, api_token=api_token)


def _base_url(url, subdomain):
    if url:
        return url.rstrip('/')
    if subdomain:
        return f"https://{subdomain.strip()}.zendesk.com"
    return None
