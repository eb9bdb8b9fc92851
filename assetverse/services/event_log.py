from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from threading import RLock
from typing import Any

from assetverse.core.config import settings

logger = logging.getLogger(__name__)


class EventLogger:
    """Append-only JSON-lines audit trail of workflow actions.

    One line per action: ``timestamp``, ``event_type`` (``request_approved``,
    ``asset_returned``, ...), the acting account and free-form ``details``.
    """

    def __init__(self, event_path: Path | None = None) -> None:
        self.event_path = event_path or settings.event_log_path
        self.event_path.parent.mkdir(parents=True, exist_ok=True)
        self.lock = RLock()

    def log_event(
        self,
        event_type: str,
        actor_email: str,
        actor_role: str,
        details: dict[str, Any],
    ) -> dict[str, Any]:
        event = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
            "actor_email": actor_email,
            "actor_role": actor_role,
            "details": details,
        }
        with self.lock, self.event_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(event, default=str) + "\n")
        return event

    def query(
        self,
        event_type: str | None = None,
        actor_email: str | None = None,
        **details: Any,
    ) -> list[dict[str, Any]]:
        """Events in the order they were logged, filtered on type, actor and detail values."""
        return [
            event
            for event in self._read()
            if (event_type is None or event.get("event_type") == event_type)
            and (actor_email is None or event.get("actor_email") == actor_email)
            and all(event.get("details", {}).get(k) == v for k, v in details.items())
        ]

    def _read(self) -> list[dict[str, Any]]:
        if not self.event_path.exists():
            return []

        with self.lock:
            lines = self.event_path.read_text(encoding="utf-8").splitlines()

        events: list[dict[str, Any]] = []
        for lineno, raw in enumerate(lines, start=1):
            if not raw.strip():
                continue
            try:
                events.append(json.loads(raw))
            except json.JSONDecodeError:
                logger.warning("Skipping unreadable audit line %d in %s", lineno, self.event_path)
        return events
