"""
Shared pytest fixtures. Mock mode is forced so the OpenAI client is never built,
and Supabase is left unconfigured so nothing is written anywhere.
"""
import os

os.environ["MOCK_MODE"] = "1"
os.environ["RATE_LIMIT"] = "1000/minute"
os.environ["SUPABASE_JWT_SECRET"] = "test-secret"
os.environ.pop("SUPABASE_URL", None)
os.environ.pop("SUPABASE_SERVICE_ROLE_KEY", None)

import pytest
from fastapi.testclient import TestClient

from certiai.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
