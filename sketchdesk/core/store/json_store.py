from __future__ import annotations

import copy
import json
import logging
import os
import time
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from threading import Lock, RLock, Timer
from typing import Any

from sketchdesk.config import AUTO_SAVE_INTERVAL_SEC
from sketchdesk.core.errors import InfrastructureError, ValidationError

logger = logging.getLogger(__name__)


class JsonStore:
    """Key-value document persisted as a flat JSON object.

    Reads and writes go to the in-memory document; the file is written by a
    debounced auto-save timer, by :meth:`save`, or by :meth:`close`. Designed to
    be resilient:
    - a missing file is an empty document
    - a corrupted file is backed up (``<name>.bak.<ts>``) and replaced by an
      empty document
    - writes are atomic (temp file + ``os.replace``)
    - unknown keys are kept as-is

    All accessors are safe to call from several threads.
    """

    def __init__(
        self,
        path: Path,
        *,
        auto_save_interval: float | None = AUTO_SAVE_INTERVAL_SEC,
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        self._path = Path(path)
        self._auto_save_interval = (
            float(auto_save_interval) if auto_save_interval and auto_save_interval > 0 else None
        )
        self._defaults: dict[str, Any] = copy.deepcopy(dict(defaults or {}))
        self._lock = RLock()
        self._io_lock = Lock()
        self._data: dict[str, Any] = {}
        self._revision = 0
        self._saved_revision = 0
        self._timer: Timer | None = None
        self._closed = False
        self.reload()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def auto_save_interval(self) -> float | None:
        return self._auto_save_interval

    @property
    def is_dirty(self) -> bool:
        with self._lock:
            return self._revision != self._saved_revision

    # --- Accessors ---
    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            if key not in self._data:
                return default
            return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        try:
            json.dumps(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Value for {key!r} is not JSON-serializable", cause=e) from e
        with self._lock:
            self._data[key] = copy.deepcopy(value)
            self._touch()

    def update(self, values: Mapping[str, Any]) -> None:
        """Set several keys as one change; readers never see a partial batch."""
        checked: dict[str, Any] = {}
        for key, value in values.items():
            try:
                json.dumps(value)
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"Value for {key!r} is not JSON-serializable", cause=e
                ) from e
            checked[key] = copy.deepcopy(value)
        if not checked:
            return
        with self._lock:
            self._data.update(checked)
            self._touch()

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the store lock so several reads see one document revision."""
        with self._lock:
            yield

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    __contains__ = has

    def delete(self, key: str) -> bool:
        with self._lock:
            if key not in self._data:
                return False
            del self._data[key]
            self._touch()
            return True

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data.keys())

    def values(self) -> list[Any]:
        with self._lock:
            return [copy.deepcopy(v) for v in self._data.values()]

    def entries(self) -> list[tuple[str, Any]]:
        with self._lock:
            return [(k, copy.deepcopy(v)) for k, v in self._data.items()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def clear(self) -> None:
        """Remove every key."""
        with self._lock:
            self._data.clear()
            self._touch()

    def reset(self) -> None:
        """Restore the defaults given at construction (empty by default)."""
        with self._lock:
            self._data = copy.deepcopy(self._defaults)
            self._touch()

    # --- Persistence ---
    def reload(self) -> None:
        """Replace the in-memory document with the file contents."""
        data = self._read()
        with self._lock:
            self._data = data
            self._saved_revision = self._revision

    def save(self) -> None:
        """Write the document to disk now.

        Raises :class:`InfrastructureError` if the file cannot be written.
        """
        with self._io_lock:
            with self._lock:
                self._cancel_timer()
                payload = json.dumps(self._data, indent=2, ensure_ascii=False)
                revision = self._revision
            tmp = self._path.with_name(self._path.name + ".tmp")
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                tmp.write_text(payload, encoding="utf-8")
                os.replace(tmp, self._path)
            except OSError as e:
                raise InfrastructureError(f"Failed to write {self._path}", cause=e) from e
            with self._lock:
                self._saved_revision = max(self._saved_revision, revision)
        logger.debug("Saved %s", self._path, extra={"path": self._path})

    def close(self) -> None:
        """Stop auto-save and flush pending changes."""
        with self._lock:
            self._closed = True
            self._cancel_timer()
        if not self.is_dirty:
            return
        try:
            self.save()
        except InfrastructureError:
            logger.exception("Failed to flush %s on close", self._path)

    # --- Internals ---
    def _read(self) -> dict[str, Any]:
        data = copy.deepcopy(self._defaults)
        if not self._path.exists():
            return data
        try:
            loaded = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(loaded, dict):
                raise ValueError(f"{self._path.name} root is not an object")
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueError.
            logger.warning("Settings file %s is corrupted (%s); starting empty", self._path, e)
            self._backup_corrupt()
            return data
        except OSError as e:
            raise InfrastructureError(f"Failed to read {self._path}", cause=e) from e
        data.update(loaded)
        return data

    def _backup_corrupt(self) -> None:
        ts = time.strftime("%Y%m%d_%H%M%S")
        bak = self._path.with_name(f"{self._path.name}.bak.{ts}")
        try:
            bak.write_bytes(self._path.read_bytes())
        except OSError:
            logger.warning("Could not back up %s", self._path, exc_info=True)

    def _touch(self) -> None:
        self._revision += 1
        self._schedule_auto_save()

    def _schedule_auto_save(self) -> None:
        if self._auto_save_interval is None or self._closed:
            return
        self._cancel_timer()
        timer = Timer(self._auto_save_interval, self._auto_save)
        timer.name = "settings-autosave"
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _auto_save(self) -> None:
        if not self.is_dirty:
            return
        try:
            self.save()
        except InfrastructureError:
            # Durability is best-effort; the next change schedules another attempt.
            logger.exception("Auto-save of %s failed", self._path)
