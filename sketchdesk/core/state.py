"""Managed application state keyed by type.

The host creates one :class:`StateManager` at startup and hands it to every
operation that needs process-wide state (the settings store, for instance).
Registration happens once; lookups afterwards are cheap and thread-safe.

Usage pattern:
    manager = StateManager()
    manager.manage(SettingsStore(...))
    store = manager.state(SettingsStore)
"""

from __future__ import annotations

from threading import RLock
from typing import Any, TypeVar

from sketchdesk.core.errors import StateNotManagedError

T = TypeVar("T")

__all__ = ["StateManager"]


class StateManager:
    """Thread-safe registry of managed state, one value per type."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._values: dict[type, Any] = {}

    def manage(self, value: object) -> bool:
        """Register *value* under its own type.

        Returns False (and keeps the existing value) if that type is already
        managed.
        """
        with self._lock:
            key = type(value)
            if key in self._values:
                return False
            self._values[key] = value
            return True

    def state(self, cls: type[T]) -> T:
        with self._lock:
            try:
                return self._values[cls]
            except KeyError:
                raise StateNotManagedError(
                    f"state {cls.__name__} is not managed; was it initialized at startup?"
                ) from None

    def try_state(self, cls: type[T]) -> T | None:
        with self._lock:
            return self._values.get(cls)

    def unmanage(self, cls: type[T]) -> T | None:
        with self._lock:
            return self._values.pop(cls, None)

    def is_managed(self, cls: type) -> bool:
        with self._lock:
            return cls in self._values
