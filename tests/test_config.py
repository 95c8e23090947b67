"""
Tests for configuration defaults and validation.
"""

import pytest
from pydantic import ValidationError

from src.config import DEFAULT_SEED_PATHS, Config, load_config


def test_defaults():
    config = load_config()

    assert config.seed_paths == ["~/.config/nvim/init.lua", "~/.tmux.conf"]
    assert config.display.program_name == "dotsim"
    assert config.display.log_level == "WARNING"
    assert config.cli.strict_exit_codes is True


def test_seed_paths_are_not_shared_between_configs():
    first = Config()
    first.tracker.seed_paths.append("~/.vimrc")

    assert Config().seed_paths == list(DEFAULT_SEED_PATHS)


def test_section_overrides():
    config = load_config(
        tracker={"seed_paths": []},
        cli={"strict_exit_codes": False},
        display={"log_level": "debug"},
    )

    assert config.seed_paths == []
    assert config.cli.strict_exit_codes is False
    assert config.display.log_level == "DEBUG"


def test_rejects_empty_seed_path():
    with pytest.raises(ValidationError):
        load_config(tracker={"seed_paths": ["~/.zshrc", ""]})


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        load_config(display={"log_level": "chatty"})
