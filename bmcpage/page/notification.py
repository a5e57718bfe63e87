"""One-shot save notification that survives a page reload.

A mutating request records ``"ok"`` or ``"err"`` in session-scoped storage.
The next page load consumes that value, shows a single toast for it, and
clears the slot so a later load shows nothing.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import astuple, dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Protocol

from .constants import (
    NOTIFICATION_KEY,
    OUTCOME_ERR,
    OUTCOME_OK,
    OUTCOME_UNSET,
    TOAST_ANIMATION,
    TOAST_COLOR,
    TOAST_COUNT,
    TOAST_DURATION_MS,
    TOAST_POSITION,
)

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemorySessionStore:
    """Session storage that lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)


class FileSessionStore:
    """Session storage persisted as a small JSON object on disk.

    Lets one CLI invocation record an outcome and a later one consume it.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        try:
            with open(self.path) as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring corrupt session file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring session file %s: not a JSON object", self.path)
            return {}
        items = {}
        for key, value in data.items():
            if isinstance(value, str):
                items[key] = value
            else:
                logger.warning("Dropping non-string session value %s=%r from %s", key, value, self.path)
        return items

    def _save(self, data: Dict[str, str]) -> None:
        if not data:
            try:
                os.remove(self.path)
            except FileNotFoundError:
                pass
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w") as f:
            json.dump(data, f)
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._load()
            data.pop(key, None)
            self._save(data)


@dataclass(frozen=True)
class Toast:
    kind: str
    message: str
    position: str
    color: str
    severity: str
    duration_ms: int
    count: int
    animation: str

    def as_args(self) -> tuple:
        return astuple(self)


SUCCESS_TOAST = Toast(
    kind="info",
    message="save ok .",
    position=TOAST_POSITION,
    color=TOAST_COLOR,
    severity="info",
    duration_ms=TOAST_DURATION_MS,
    count=TOAST_COUNT,
    animation=TOAST_ANIMATION,
)

ERROR_TOAST = Toast(
    kind="info",
    message="save err.",
    position=TOAST_POSITION,
    color=TOAST_COLOR,
    severity="error",
    duration_ms=TOAST_DURATION_MS,
    count=TOAST_COUNT,
    animation=TOAST_ANIMATION,
)

_TOASTS = {OUTCOME_OK: SUCCESS_TOAST, OUTCOME_ERR: ERROR_TOAST}


class NotificationStore:
    def __init__(self, session: SessionStore, toaster: Callable[[Toast], None]) -> None:
        self.session = session
        self.toaster = toaster

    def record_outcome(self, outcome: str) -> None:
        if outcome not in _TOASTS:
            raise ValueError(f"outcome must be 'ok' or 'err', got {outcome!r}")
        logger.debug("Recording notification outcome %s", outcome)
        self.session.set(NOTIFICATION_KEY, outcome)

    def peek(self) -> str:
        value = self.session.get(NOTIFICATION_KEY)
        return value if isinstance(value, str) and value in _TOASTS else OUTCOME_UNSET

    def consume_and_clear(self) -> str:
        """Show the pending toast, if any, and empty the slot.

        The key is removed even when nothing (or an unknown value) was stored,
        so calling this twice in one page life toasts at most once.
        """
        value = self.session.get(NOTIFICATION_KEY)
        toast = None
        try:
            if isinstance(value, str):
                toast = _TOASTS.get(value)
            if toast is not None:
                self.toaster(toast)
            elif value is not None:
                logger.warning("Discarding unknown notification value %r", value)
        finally:
            self.session.remove(NOTIFICATION_KEY)
        return value if toast is not None else OUTCOME_UNSET


__all__ = [
    "SessionStore",
    "MemorySessionStore",
    "FileSessionStore",
    "Toast",
    "SUCCESS_TOAST",
    "ERROR_TOAST",
    "NotificationStore",
]
