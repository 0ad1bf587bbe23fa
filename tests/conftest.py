"""Pytest fixtures for catalog backend, gateway and API tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.commerce.fixture_backend import FixtureBackend
from storefront.commerce.models import AdminSession
from storefront.main import app
from storefront.services.catalog import CatalogGateway, get_catalog_gateway


@pytest.fixture
def fixture_backend():
    """Fixture backend over the sample catalog, without artificial latency."""
    return FixtureBackend(delays={})


@pytest.fixture
def gateway(fixture_backend):
    return CatalogGateway(fixture_backend)


@pytest.fixture
def session():
    return AdminSession(token="mock_jwt_token_1700000000000", email="admin@sector17.com")


@pytest.fixture
def served_app(gateway):
    """The FastAPI app wired to the latency-free gateway."""
    app.dependency_overrides[get_catalog_gateway] = lambda: gateway
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(served_app):
    return TestClient(served_app)


@pytest.fixture
def auth_headers(session):
    return {"Authorization": f"Bearer {session.token}"}
