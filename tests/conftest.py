"""
Test configuration and fixtures
"""

import os

# Set ENVIRONMENT before importing any modules that read settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from welcome.i18n import RESOURCES, Catalog, Translator


@pytest.fixture
def catalog():
    """Catalog built from the bundled resources"""
    return Catalog(RESOURCES, default_language="en")


@pytest.fixture
def translator(catalog):
    return Translator(catalog)


@pytest.fixture
def template_env():
    from welcome.api.templates import templates

    return templates.env


@pytest.fixture
def test_client():
    """FastAPI test client (fresh cookie jar per test)"""
    from welcome.api.main import app

    return TestClient(app)
