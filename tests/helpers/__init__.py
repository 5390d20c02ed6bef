"""Test helpers for Zendesk client tests."""

from .replay_transport import REPLAY_BASE_URL, RECORDINGS_DIR, ReplayTransport

__all__ = [
    "REPLAY_BASE_URL",
    "RECORDINGS_DIR",
    "ReplayTransport",
]
