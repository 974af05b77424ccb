"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Service and HTTP tests against the in-memory store
    - unit/       : Unit tests (models, parsing, config; no I/O)
"""
import os
import sys
from typing import Any, Dict, List

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Keep a developer's .env out of test runs
os.environ.setdefault("ENV_FILE", os.path.join(PROJECT_ROOT, "tests", ".env.test"))
os.environ.setdefault("ENV", "testing")

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    make_artist_name,
    make_album,
    make_album_create_request,
    make_album_update_request,
)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "component: marks tests as component tests")


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def seed_albums() -> List[Dict[str, Any]]:
    """Copy of the service's seed records"""
    from microservices.album_service.album_repository import SEED_ALBUMS

    return [dict(album) for album in SEED_ALBUMS]


@pytest.fixture
def sample_create_request() -> Dict[str, Any]:
    """Valid creation body from the reference scenario"""
    return {
        "artistName": "X",
        "collectionName": "Y",
        "releaseDate": "2020-01-01T00:00:00Z",
        "primaryGenreName": "Rock",
    }
