import pytest
from fastapi.testclient import TestClient

from app.db.session import get_executor
from app.main import app
from app.tests.fakes import FakeProcedureExecutor


@pytest.fixture
def executor():
    return FakeProcedureExecutor()


@pytest.fixture
def client(executor):
    """TestClient whose endpoints talk to the fake executor."""
    app.dependency_overrides[get_executor] = lambda: executor
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
