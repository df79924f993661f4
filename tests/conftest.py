"""
Shared fixtures: a fresh store and a local summarizer per test.
"""
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_store, get_summarizer
from app.main import app
from app.services.student.store import StudentStore
from app.services.summary.base import TemplateSummarizer


@pytest.fixture
def store():
    return StudentStore()


@pytest.fixture
def summarizer():
    return TemplateSummarizer()


@pytest.fixture
def client(store, summarizer):
    """Test client wired to the per-test store and summarizer"""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_summarizer] = lambda: summarizer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def ann():
    return {"name": "Ann", "age": 20, "course": "CS", "email": "a@x.com"}
