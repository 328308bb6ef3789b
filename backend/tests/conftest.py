import pytest
from app.main import app
from app.store import GroupStore, get_store


@pytest.fixture(autouse=True)
def store():
    """Give every test a fresh in-memory store behind the API."""
    fresh = GroupStore()
    app.dependency_overrides[get_store] = lambda: fresh
    yield fresh
    app.dependency_overrides.pop(get_store, None)
