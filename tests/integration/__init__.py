"""Integration tests for the Zendesk client.

These tests run the full client stack against recorded HTTP exchanges
instead of a live Zendesk account.
"""
