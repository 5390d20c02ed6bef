"""Pytest configuration and fixtures for integration tests.

Integration tests drive the full APIWrapper -> TicketsAPI -> transport path
against recorded HTTP exchanges, so they run without network access or
real credentials.
"""

from typing import Callable
from unittest.mock import Mock

import pytest

from src.zendesk_client.api_wrapper import APIWrapper
from src.zendesk_client.auth import Authenticator, Credentials
from tests.helpers.replay_transport import REPLAY_BASE_URL, ReplayTransport


@pytest.fixture
def replay_authenticator() -> Mock:
    """Authenticator pointing at the host used in the recordings."""
    auth = Mock(spec=Authenticator)
    auth.get_credentials.return_value = Credentials(
        url=REPLAY_BASE_URL,
        user="agent@example.com",
        api_token="replay-token",
    )
    return auth


@pytest.fixture
def replay_client(replay_authenticator) -> Callable[[str], tuple]:
    """Factory building an APIWrapper that replays a fixture file.

    Returns:
        Callable taking a recording name and returning (api, transport)
    """
    def _build(fixture_name: str):
        transport = ReplayTransport.from_fixture(fixture_name)
        return APIWrapper(replay_authenticator, transport=transport), transport

    return _build
