from __future__ import annotations

import copy
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from threading import RLock
from typing import Any
from uuid import uuid4

_MISSING = object()


class DataStore:
    """In-process document store: one dict per collection behind a single lock."""

    COLLECTIONS = (
        "users",
        "assets",
        "requests",
        "assigned_assets",
        "affiliations",
        "packages",
        "payments",
    )

    def __init__(self) -> None:
        self.lock = RLock()
        self.users: dict[str, dict[str, Any]] = {}
        self.assets: dict[str, dict[str, Any]] = {}
        self.requests: dict[str, dict[str, Any]] = {}
        self.assigned_assets: dict[str, dict[str, Any]] = {}
        self.affiliations: dict[str, dict[str, Any]] = {}
        self.packages: dict[str, dict[str, Any]] = {}
        self.payments: dict[str, dict[str, Any]] = {}
        self._undo_logs: list[dict[tuple[str, str], Any]] = []

    @contextmanager
    def transaction(self) -> Iterator[DataStore]:
        """Run a block of reads and writes as one unit.

        The lock is held for the whole block, so no other transaction can
        observe or interleave with its intermediate state. Each row is saved
        the first time the block writes it; if the block raises, those rows
        are put back and rows it created are dropped. A nested transaction
        rolls back with the block that encloses it.
        """
        with self.lock:
            undo: dict[tuple[str, str], Any] = {}
            self._undo_logs.append(undo)
            try:
                yield self
            except BaseException:
                for (name, key), previous in undo.items():
                    rows = getattr(self, name)
                    if previous is _MISSING:
                        rows.pop(key, None)
                    else:
                        rows[key] = previous
                raise
            finally:
                self._undo_logs.pop()

    def record_write(self, name: str, key: str) -> None:
        """Save the current value of a row in every open transaction before it changes."""
        with self.lock:
            current = getattr(self, name).get(key, _MISSING)
            for undo in self._undo_logs:
                if (name, key) not in undo:
                    undo[(name, key)] = current if current is _MISSING else copy.deepcopy(current)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"
