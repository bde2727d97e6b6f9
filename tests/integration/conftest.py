"""
pytest fixtures for integration tests.

Integration tests use:
- FastAPI's TestClient (in-process)
- The real renderer and use case
- Dependency overrides to inject MockMailTransport instead of SMTP

Decision: Only the network edge is replaced, so these tests exercise
routing, parsing, validation, rendering and error mapping together.
"""

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.presentation.dependencies import get_mail_transport
from tests.mocks.mock_mail_transport import MockMailTransport


@pytest.fixture
def api_client():
    """
    Create FastAPI TestClient with MockMailTransport dependency override.

    Returns:
        TestClient instance for making API requests

    Decision: Using TestClient as a context manager runs the lifespan, so
    startup code is covered as well.
    """
    MockMailTransport.clear()
    app.dependency_overrides[get_mail_transport] = lambda: MockMailTransport()

    with TestClient(app) as client:
        yield client

    app.dependency_overrides = {}
    MockMailTransport.clear()
