"""
Domain for the persisted application state: theme, sidebar docking default,
view mode and zen mode.

The settings store is untyped JSON; :class:`AppState` is the typed overlay on top
of it. Reading is total: a missing or malformed value falls back to the field's
default, malformed values are logged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sketchdesk.application.ports.settings import KeyValueStore
from sketchdesk.core.errors import ValidationError

logger = logging.getLogger(__name__)

KEY_THEME = "theme"
KEY_DEFAULT_SIDEBAR_DOCKED = "defaultSidebarDockedPreference"
KEY_VIEW_MODE = "viewModeEnabled"
KEY_ZEN_MODE = "zenModeEnabled"

_MISSING = object()


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> Theme:
        """Parse a theme name, case-insensitive. Raises ValueError."""
        if not isinstance(value, str):
            raise ValueError(f"expected a theme name, got {type(value).__name__} {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"unknown theme {value!r}") from None


def _parse_bool(value: Any) -> bool:
    # Only real JSON booleans; 0/1 and "true" are rejected.
    if isinstance(value, bool):
        return value
    raise ValueError(f"expected a boolean, got {type(value).__name__} {value!r}")


@dataclass(frozen=True, slots=True)
class _Field:
    key: str
    attr: str
    parse: Callable[[Any], Any]
    encode: Callable[[Any], Any]


_FIELDS: tuple[_Field, ...] = (
    _Field(KEY_THEME, "theme", Theme.parse, lambda theme: theme.value),
    _Field(KEY_DEFAULT_SIDEBAR_DOCKED, "default_sidebar_docked_preference", _parse_bool, bool),
    _Field(KEY_VIEW_MODE, "view_mode_enabled", _parse_bool, bool),
    _Field(KEY_ZEN_MODE, "zen_mode_enabled", _parse_bool, bool),
)

STORE_KEYS: tuple[str, ...] = tuple(f.key for f in _FIELDS)


@dataclass(frozen=True, slots=True)
class AppState:
    theme: Theme = Theme.LIGHT
    default_sidebar_docked_preference: bool = True
    view_mode_enabled: bool = False
    zen_mode_enabled: bool = False

    @classmethod
    def from_store(cls, store: KeyValueStore) -> AppState:
        """Decode the state from the settings store. Never raises."""
        defaults = cls()
        values: dict[str, Any] = {}
        for f in _FIELDS:
            raw = store.get(f.key, _MISSING)
            if raw is _MISSING:
                continue
            try:
                values[f.attr] = f.parse(raw)
            except ValueError as e:
                logger.warning(
                    "Failed to read %r from settings store (%s); using default %r",
                    f.key,
                    e,
                    getattr(defaults, f.attr),
                    extra={"key": f.key},
                )
        return cls(**values)

    def store(self, store: KeyValueStore) -> None:
        """Write all four keys in one batch; other keys in the store are left alone."""
        store.update(self.to_dict())

    @classmethod
    def parse(cls, payload: Any) -> AppState:
        """Strict conversion of a front-end payload (all keys required).

        Raises :class:`ValidationError` listing every problem. Unknown keys are
        ignored.
        """
        if not isinstance(payload, Mapping):
            raise ValidationError(f"AppState must be an object, got {type(payload).__name__}")
        values: dict[str, Any] = {}
        problems: list[str] = []
        for f in _FIELDS:
            if f.key not in payload:
                problems.append(f"missing field {f.key!r}")
                continue
            try:
                values[f.attr] = f.parse(payload[f.key])
            except ValueError as e:
                problems.append(f"{f.key}: {e}")
        if problems:
            raise ValidationError("Invalid AppState: " + "; ".join(problems))
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {f.key: f.encode(getattr(self, f.attr)) for f in _FIELDS}
