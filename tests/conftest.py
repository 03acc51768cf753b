"""Pytest configuration and shared fixtures"""
import pytest
from fastapi.testclient import TestClient

from massconv.conversion import build_conversion_table, load_seed_rules
from massconv.main import app


@pytest.fixture
def table():
    """Conversion table built from the known seed rules"""
    return build_conversion_table(load_seed_rules())


@pytest.fixture(scope="function")
def client():
    """Create FastAPI test client"""
    with TestClient(app) as test_client:
        yield test_client
