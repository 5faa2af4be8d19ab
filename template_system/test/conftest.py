"""
Pytest configuration and shared fixtures for template system tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add template_system to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from template_system.config.manager import RESOLVED_VALUE_KEYS
from template_system.template import Template


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "test_cli" in item.nodeid or "test_composer" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def resolved_values():
    """Literal option values for resolved providers."""
    return {
        "APP_LABEL": "myapp",
        "ZYNC_AUTHENTICATION_TOKEN": "tok0000000000000",
        "ZYNC_DATABASE_PASSWORD": "pw000000000000000",
        "ZYNC_SECRET_KEY_BASE": "sk00000000000000",
    }


@pytest.fixture
def template():
    """Provide an empty template."""
    return Template("test-template")


@pytest.fixture
def temp_workspace():
    """Provide a temporary workspace directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def clean_env():
    """Remove option values from the environment and restore it afterwards."""
    with patch.dict(os.environ):
        for key in RESOLVED_VALUE_KEYS:
            os.environ.pop(key, None)
        yield
