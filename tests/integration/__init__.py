"""Integration tests that call the live story provider.

These tests are slow and costly - run selectively:
    pytest tests/integration/ -v

Requires GOOGLE_API_KEY in .env.
"""
