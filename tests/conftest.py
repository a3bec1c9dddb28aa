"""
Pytest configuration and fixtures.
"""

import sys
import logging
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from checkers import config as config_module
from checkers.board import Board
from checkers.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the settings file at a temporary directory and reset the cache."""
    config_home = tmp_path / "config_home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    config_module.clear_config()
    yield config_home
    config_module.clear_config()

    # Handlers created by setup_logger hold on to captured streams
    logger = logging.getLogger("checkers")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def strict_config():
    """A config with standard checkers capture rules."""
    config = Config()
    config.game.rules.strict_capture = True
    return config


@pytest.fixture
def empty_board():
    """Create an empty board."""
    return Board()


@pytest.fixture
def initial_board():
    """Create a board with the starting layout."""
    return Board.initial()
