"""
Pytest fixtures for the navtabs test suite.
"""

import pytest
from navtabs.app import create_app
from navtabs.core.view import View


@pytest.fixture
def app():
    """Create application for testing."""
    return create_app('testing')


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def view():
    """Standalone view collecting assets and scripts."""
    return View()
