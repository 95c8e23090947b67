"""
Configuration for dotsim.
Defaults only: the simulator reads no config file and no environment.
"""
from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_SEED_PATHS = (
    "~/.config/nvim/init.lua",
    "~/.tmux.conf",
)


class TrackerConfig(BaseModel):
    seed_paths: list[str] = Field(default_factory=lambda: list(DEFAULT_SEED_PATHS))

    @field_validator("seed_paths")
    @classmethod
    def _no_empty_paths(cls, value: list[str]) -> list[str]:
        if any(not p for p in value):
            raise ValueError("seed paths must be non-empty strings")
        return value


class DisplayConfig(BaseModel):
    program_name: str = "dotsim"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class CliConfig(BaseModel):
    # Usage errors and unknown commands exit 2; False keeps every run at 0
    strict_exit_codes: bool = True


class Config(BaseModel):
    tracker: TrackerConfig = Field(default_factory=TrackerConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    cli: CliConfig = Field(default_factory=CliConfig)

    @property
    def seed_paths(self) -> list[str]:
        return self.tracker.seed_paths


def load_config(**overrides: Any) -> Config:
    """Build the config from defaults, applying per-section overrides."""
    return Config(**overrides)
