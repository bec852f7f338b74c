import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so 'profile_service' is importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("SUPABASE_DISABLED", "1")
os.environ.setdefault("USE_LOCAL_DB", "0")


@pytest.fixture()
def mock_repo() -> Mock:
    """Stand-in storage collaborator; tests set return values per call."""
    repo = Mock()
    repo.backend = "memory"
    return repo


@pytest.fixture()
def client(mock_repo) -> TestClient:
    # lazy import after env configured
    from profile_service.infrastructure.config import Settings
    from profile_service.main import create_app

    app = create_app(Settings(supabase_disabled=True), profile_repo=mock_repo)
    return TestClient(app)


@pytest.fixture()
def memory_client():
    """Client backed by a real in-memory repository."""
    from profile_service.infrastructure.config import Settings
    from profile_service.main import create_app

    app = create_app(Settings(supabase_disabled=True))
    with TestClient(app) as c:
        yield c
