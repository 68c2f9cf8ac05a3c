"""Settings registry: the one process-wide handle to ``settings.json``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Any

from sketchdesk.config import AUTO_SAVE_INTERVAL_SEC, SETTINGS_FILE_NAME
from sketchdesk.core.paths import get_app_data_dir
from sketchdesk.core.state import StateManager
from sketchdesk.core.store import JsonStore

log = logging.getLogger(__name__)


class SettingsStore:
    """Owns the settings :class:`JsonStore`; registered on the StateManager at startup.

    Lifecycle: ``init`` once during startup, ``from_manager`` anywhere after,
    ``close`` at shutdown (flushes pending changes).
    """

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    @classmethod
    def init(
        cls,
        manager: StateManager,
        *,
        data_dir: Path | None = None,
        auto_save_interval: float | None = AUTO_SAVE_INTERVAL_SEC,
    ) -> None:
        already = manager.is_managed(cls)
        assert not already, "SettingsStore.init() called more than once"
        if already:
            log.warning("Settings store already initialized; keeping the first handle")
            return
        path = (data_dir or get_app_data_dir()) / SETTINGS_FILE_NAME
        settings = cls(JsonStore(path, auto_save_interval=auto_save_interval))
        manager.manage(settings)
        log.info("Settings store opened at %s", path)

    @classmethod
    def from_manager(cls, manager: StateManager) -> SettingsStore:
        """Return the registered store; raises StateNotManagedError before ``init``."""
        return manager.state(cls)

    @property
    def inner(self) -> JsonStore:
        return self._store

    @property
    def path(self) -> Path:
        return self._store.path

    def get(self, key: str, default: Any = None) -> Any:
        return self._store.get(key, default)

    def update(self, values: Mapping[str, Any]) -> None:
        self._store.update(values)

    def locked(self) -> AbstractContextManager[None]:
        return self._store.locked()

    def close(self) -> None:
        self._store.close()
