"""
Pytest configuration and shared fixtures for codehash tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from codehash.crypto.digest import DigestAlgorithm  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def page_size() -> int:
    """Conventional code signing page size."""
    return 4096


@pytest.fixture
def patterned_data() -> bytes:
    """10,000 bytes where every page has distinct content."""
    return bytes(i % 251 for i in range(10_000))


@pytest.fixture(params=list(DigestAlgorithm), ids=lambda a: a.label)
def algorithm(request) -> DigestAlgorithm:
    """Each supported digest algorithm in turn."""
    return request.param


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CODEHASH_* variables so config tests start from defaults."""
    import os
    for key in list(os.environ):
        if key.startswith("CODEHASH_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
