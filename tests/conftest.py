"""Test fixtures and configuration."""

import pytest
from fastapi.testclient import TestClient

from goloyal.main import create_app
from goloyal.repositories.memory import MemoryStorage
from goloyal.schemas.demo_request import DemoRequestIn


@pytest.fixture
def storage():
    """Fresh in-memory store."""
    return MemoryStorage()


@pytest.fixture
def app(storage):
    """App wired to the test store."""
    return create_app(storage)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def demo_payload():
    """Valid submission as the landing page form sends it."""
    return {
        "businessName": "Bean There Café",
        "contactName": "Dina Martinez",
        "email": "demo@example.com",
        "phone": "555-0134",
    }


@pytest.fixture
def demo_request_in(demo_payload):
    return DemoRequestIn.model_validate(demo_payload)
