# receipt_processor/tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from receipt_processor.main import app
from receipt_processor.routes.receipts import get_store
from receipt_processor.vault.repository import ResultStore

@pytest.fixture
def store():
    return ResultStore()

@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
