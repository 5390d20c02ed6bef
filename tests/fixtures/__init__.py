"""Test fixtures for Zendesk client tests.

This module provides:
- Recorded HTTP exchanges for the ticket merge endpoint (recordings/*.json)
- The merge calls that produce those recordings
"""

from .merge_scenarios import (
    MERGE_WITH_COMMENTS,
    MERGE_MINIMAL,
    MERGE_TARGET_COMMENT_ONLY,
    MERGE_PUBLIC_COMMENTS,
    MERGE_SCENARIOS,
)

__all__ = [
    "MERGE_WITH_COMMENTS",
    "MERGE_MINIMAL",
    "MERGE_TARGET_COMMENT_ONLY",
    "MERGE_PUBLIC_COMMENTS",
    "MERGE_SCENARIOS",
]
