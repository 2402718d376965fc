"""Pytest configuration and fixtures"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def clean_env():
    """Remove AWSREGION_* environment variables for the duration of a test"""
    env_vars_to_clear = [k for k in os.environ if k.startswith('AWSREGION_')]
    original_env = {k: os.environ.pop(k) for k in env_vars_to_clear}
    yield
    for key in [k for k in os.environ if k.startswith('AWSREGION_')]:
        os.environ.pop(key)
    os.environ.update(original_env)


@pytest.fixture
def no_config_file(clean_env):
    """Point the config file path somewhere that doesn't exist"""
    with patch('awsregion.config.settings.get_config_path') as mock_path:
        mock_path.return_value = Path("/nonexistent/config.toml")
        yield mock_path


@pytest.fixture
def config_file(tmp_path, clean_env):
    """Factory that writes a config.toml and points settings at it"""
    config_path = tmp_path / "config.toml"
    with patch('awsregion.config.settings.get_config_path') as mock_path:
        mock_path.return_value = config_path

        def write(content: bytes) -> Path:
            config_path.write_bytes(content)
            return config_path

        yield write
