"""
Pytest configuration and shared fixtures.
"""

import pytest
from typer.testing import CliRunner

from src.config import DEFAULT_SEED_PATHS, load_config
from src.storage.tracker import Tracker


@pytest.fixture
def tracker():
    """
    Create a fresh store holding the default seed paths.

    Returns:
        Tracker seeded with ~/.config/nvim/init.lua and ~/.tmux.conf
    """
    return Tracker(DEFAULT_SEED_PATHS)


@pytest.fixture
def empty_tracker():
    """Create a store with no tracked paths."""
    return Tracker()


@pytest.fixture
def config():
    """Default configuration."""
    return load_config()


@pytest.fixture
def runner():
    """CLI runner for end-to-end invocations."""
    return CliRunner()
