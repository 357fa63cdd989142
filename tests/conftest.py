"""Shared fixtures for the TinyTwitter tests."""

import pytest

from helpers import DOC_NONCE, DOC_OAUTH, DOC_TIMESTAMP


@pytest.fixture
def oauth():
    return DOC_OAUTH


@pytest.fixture
def frozen():
    """Builder kwargs that pin the clock and nonce."""
    return {"clock": lambda: DOC_TIMESTAMP, "nonce_factory": lambda: DOC_NONCE}
