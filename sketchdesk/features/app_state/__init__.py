"""Persisted application state (theme, sidebar docking, view/zen mode)."""

from sketchdesk.features.app_state.domain import STORE_KEYS, AppState, Theme
from sketchdesk.features.app_state.repository import SettingsStore

__all__ = ["STORE_KEYS", "AppState", "SettingsStore", "Theme"]
