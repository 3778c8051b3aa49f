"""
Pytest configuration and shared fixtures for rfc822time testing.
"""

import os
import sys

import pytest
import yaml

from rfc822time.core.logging_manager import LoggingManager


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep configuration variables, log handlers and excepthook per test"""
    for key in list(os.environ):
        if key.startswith("RFC822TIME_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)

    yield

    LoggingManager().reset()


@pytest.fixture
def temp_config_dir(tmp_path):
    """Configuration directory holding a quiet default_config.yaml"""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    default_config = {
        "app_name": "rfc822time-test",
        "logging": {
            "level": "WARNING",
            "log_to_console": True,
        },
        "cli": {
            "skip_invalid": True,
            "show_tokens": False,
        },
    }

    with open(config_dir / "default_config.yaml", "w") as f:
        yaml.dump(default_config, f)

    return config_dir


@pytest.fixture
def write_config():
    """Write a YAML configuration file into a directory"""
    def _write(directory, name, data):
        path = directory / name
        with open(path, "w") as f:
            yaml.dump(data, f)
        return path

    return _write
