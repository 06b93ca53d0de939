"""
Shared pytest configuration and fixtures for the startup configuration tests.
"""

import pytest

from serverconf.config import RuntimeConfigProvider


VALID_SECRET = "ipNUnWxmBLCxTEzXcyamrdy0Q3G7HxdKsAvyg30R9SCof0JydiZFiA3dLSkRsbLF"


@pytest.fixture
def valid_properties():
    """Raw values that satisfy every server parameter."""
    return {
        'password_secret': VALID_SECRET
    }


@pytest.fixture
def provider_for():
    """Build an in-memory provider from a dict."""
    def _build(values):
        return RuntimeConfigProvider(values)
    return _build


@pytest.fixture
def node_id_files(tmp_path):
    """
    Provides a non-empty, an empty and a missing node ID file path.
    Permissions are restored on teardown so tmp_path can be cleaned up.
    """
    non_empty = tmp_path / "node-id"
    non_empty.write_text("test-node-id", encoding="utf-8")
    empty = tmp_path / "empty-node-id"
    empty.touch()
    missing = tmp_path / "missing-node-id"

    yield {'non_empty': non_empty, 'empty': empty, 'missing': missing}

    for path in (non_empty, empty):
        if path.exists():
            path.chmod(0o600)
    tmp_path.chmod(0o700)
