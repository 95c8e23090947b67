"""
In-memory store for tracked dotfile paths.

Keeps an ordered collection of unique path strings. Paths are opaque:
no normalization, no home-directory expansion, exact string equality.
Nothing is read from or written to disk; the store lives for one run.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .models import Listing, Outcome, TrackedEntry

logger = logging.getLogger(__name__)


class Tracker:
    def __init__(self, seed_paths: Iterable[str] = ()):
        self._paths: list[str] = []
        for path in seed_paths:
            if path not in self._paths:
                self._paths.append(path)
        logger.debug(f"Tracker initialized with {len(self._paths)} path(s)")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, path: str) -> bool:
        return path in self._paths

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._paths))

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._paths)

    def list(self) -> Listing:
        """Return every path with its 1-based position, in insertion order."""
        if not self._paths:
            return Listing(Outcome.EMPTY)
        return Listing(Outcome.LISTED, self._entries())

    def sync(self) -> Listing:
        """
        Simulated sync: acknowledges each path in order.

        No file is touched. The returned entries are what the caller
        reports as synchronized.
        """
        if not self._paths:
            return Listing(Outcome.NOTHING_TO_SYNC)
        for path in self._paths:
            logger.debug(f"Simulated sync of {path}")
        return Listing(Outcome.SYNCED, self._entries())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, path: str) -> Outcome:
        """Append path unless it is already tracked."""
        _require_path(path)
        if self.contains(path):
            logger.debug(f"Skipping duplicate path: {path}")
            return Outcome.DUPLICATE
        self._paths.append(path)
        logger.debug(f"Added {path} at position {len(self._paths)}")
        return Outcome.ADDED

    def remove(self, path: str) -> Outcome:
        """Delete the first entry equal to path; later entries shift down."""
        _require_path(path)
        for index, tracked in enumerate(self._paths):
            if tracked == path:
                del self._paths[index]
                logger.debug(f"Removed {path} from position {index + 1}")
                return Outcome.REMOVED
        logger.debug(f"Path not tracked: {path}")
        return Outcome.NOT_FOUND

    def _entries(self) -> tuple[TrackedEntry, ...]:
        return tuple(
            TrackedEntry(position=i, path=p)
            for i, p in enumerate(self._paths, start=1)
        )


def _require_path(path: str) -> None:
    if not path:
        raise ValueError("path must be a non-empty string")
