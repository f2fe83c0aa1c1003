"""Pytest configuration."""
import json
import logging
from pathlib import Path
from typing import Generator

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "unit: mark test as a unit test that can run in isolation",
    )
    config.addinivalue_line(
        "markers",
        "e2e: mark test as an end-to-end run of the command line",
    )


@pytest.fixture(scope="function", autouse=True)
def isolated_home(tmp_path, monkeypatch) -> Path:
    """Point HOME at a temporary directory so the real config is never touched."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture(scope="function", autouse=True)
def reset_gator_logger() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging during a test."""
    yield

    logger = logging.getLogger("gator")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []


@pytest.fixture
def sample_config():
    """Config file contents with a key gator does not know about."""
    return {"current_username": "alice", "other_field": "x"}


@pytest.fixture
def config_file(isolated_home, sample_config) -> Path:
    """Write the sample config to ~/.gatorconfig.json."""
    path = isolated_home / ".gatorconfig.json"
    path.write_text(json.dumps(sample_config))
    return path
