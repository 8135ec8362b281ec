"""
Pytest configuration and shared fixtures for networksetup tests.

This module provides reusable fixtures and configuration for all tests.
"""

import pytest
from unittest.mock import MagicMock


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests that never launch networksetup")


@pytest.fixture
def proxy_address():
    """Provide a proxy endpoint without credentials."""
    from networksetup import Address

    return Address("0.0.0.0", "80")


@pytest.fixture
def auth_proxy_address():
    """Provide a proxy endpoint with credentials."""
    from networksetup import Address

    return Address("proxy.company.com", "8080").auth("alice", "s3cret")


@pytest.fixture
def mock_config():
    """Provide a settings dictionary as stored in config.toml."""
    return {
        "settings": {
            "debug": True,
            "sudo": True,
            "networksetup_path": "/usr/sbin/networksetup",
            "log_file": "",
        },
    }


@pytest.fixture
def temp_config_dir(tmp_path):
    """Provide a temporary config directory."""
    config_dir = tmp_path / ".config" / "networksetup"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def mock_run_command():
    """Provide a mock for run_command that reports success."""
    mock = MagicMock()
    mock.return_value = 0
    return mock


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration between tests."""
    import logging

    from networksetup.logging_config import NetworkSetupLogger

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)
    NetworkSetupLogger._initialized = False
    NetworkSetupLogger._debug_enabled = False
    NetworkSetupLogger._log_file = None
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    NetworkSetupLogger._initialized = False
