"""
Data models for tracked paths and the outcomes of store operations.
Plain dataclasses, positions are derived when a listing is built.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Outcome(str, Enum):
    ADDED = "added"
    DUPLICATE = "duplicate"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    LISTED = "listed"
    EMPTY = "empty"
    SYNCED = "synced"
    NOTHING_TO_SYNC = "nothing_to_sync"


@dataclass(frozen=True)
class TrackedEntry:
    position: int
    path: str


@dataclass(frozen=True)
class Listing:
    outcome: Outcome
    entries: tuple[TrackedEntry, ...] = field(default_factory=tuple)

    @property
    def paths(self) -> list[str]:
        return [e.path for e in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
