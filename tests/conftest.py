"""
Test Configuration Module
"""

import pytest


@pytest.fixture
def caching_keys():
    """Caching keys in the order a resolver composes them"""
    return ["$context.arguments.id", "$context.identity.sub"]


@pytest.fixture
def api_key_input():
    """A da2 key as returned by ListApiKeys"""
    return {
        "id": "da2-abcdefghijklmnopqrstuvwxyz",
        "description": "ci key",
        "expires": "1700002800",
        "deletes": "1705186800",
    }
