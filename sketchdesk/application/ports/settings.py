"""Application port for the settings backing store.

Domain code reads and writes raw JSON values through this contract only; the
concrete store (``JsonStore`` wrapped by ``SettingsStore``) lives in core.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        """Return the raw value stored under *key*, or *default*."""

    def update(self, values: Mapping[str, Any]) -> None:
        """Store several raw JSON values as one change; persistence is deferred."""
