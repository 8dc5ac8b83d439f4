"""In-memory, auto-dismissing user notifications."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..core.config import settings
from ..schemas.listings import NotificationOut

logger = logging.getLogger(__name__)


@dataclass
class _NotificationEntry:
    message: str
    level: str
    created_at: float


class NotificationCenter:
    """Very small notification queue with TTL eviction."""

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = settings.notification_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._entries: List[_NotificationEntry] = []

    def push(self, message: str, level: str = "error") -> None:
        self._evict_expired()
        log = logger.error if level == "error" else logger.info
        log(message)
        self._entries.append(_NotificationEntry(message=message, level=level, created_at=self._clock()))

    def active(self) -> list[NotificationOut]:
        self._evict_expired()
        now = self._clock()
        return [
            NotificationOut(
                message=entry.message,
                level=entry.level,
                dismiss_after_seconds=max(0.0, self._ttl - (now - entry.created_at)),
            )
            for entry in self._entries
        ]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        self._evict_expired()
        return len(self._entries)

    def _evict_expired(self) -> None:
        now = self._clock()
        self._entries = [entry for entry in self._entries if now - entry.created_at < self._ttl]
