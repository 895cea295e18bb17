import os
import sys
from pathlib import Path

import pytest

# Keep tests off real services regardless of the developer's .env
os.environ.setdefault("OTEL_ENABLED", "false")

# Project root holds main.py and the app/ namespace package
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from fastapi.testclient import TestClient  # noqa: E402

from app.api.dependencies import get_database, get_identity_provider, get_oracle  # noqa: E402
from app.features.database import DatabaseClient  # noqa: E402
from app.features.identity import SupabaseIdentityProvider  # noqa: E402
from fakes import ALICE_ID, BOB_ID, FakeOracle, FakeSupabase  # noqa: E402


@pytest.fixture
def supabase():
    fake = FakeSupabase()
    fake.auth.add("alice-token", ALICE_ID, "alice@example.com", full_name="Alice Liddell", avatar_url="https://img/alice.png")
    fake.auth.add("bob-token", BOB_ID, "bob@example.com", first_name="Bob")
    return fake


@pytest.fixture
def db(supabase):
    return DatabaseClient(supabase)


@pytest.fixture
def oracle():
    return FakeOracle()


@pytest.fixture
def client(supabase, db, oracle):
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_oracle] = lambda: oracle
    app.dependency_overrides[get_identity_provider] = lambda: SupabaseIdentityProvider(supabase)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def alice():
    return {"Authorization": "Bearer alice-token"}


@pytest.fixture
def bob():
    return {"Authorization": "Bearer bob-token"}
