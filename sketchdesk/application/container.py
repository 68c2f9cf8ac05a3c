"""Composition root / DI container.

UI should not reach into core or features directly. This container lives in the
application layer, owns the StateManager and wires use-cases and the command
router on first access.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sketchdesk.application.commands import CommandRouter, build_command_router
from sketchdesk.application.use_cases.app_state import GetAppStateUseCase, SetAppStateUseCase
from sketchdesk.config import AUTO_SAVE_INTERVAL_SEC
from sketchdesk.core.events import EventBus
from sketchdesk.core.paths import get_app_data_dir
from sketchdesk.core.state import StateManager
from sketchdesk.features.app_state import SettingsStore

log = logging.getLogger(__name__)


class Container:
    """Resolves application services. Single place to swap implementations if needed."""

    def __init__(
        self,
        *,
        data_dir: Path | None = None,
        auto_save_interval: float | None = AUTO_SAVE_INTERVAL_SEC,
    ) -> None:
        self._data_dir = data_dir
        self._auto_save_interval = auto_save_interval
        self._state_manager = StateManager()
        self._event_bus: EventBus | None = None
        self._get_app_state_uc: GetAppStateUseCase | None = None
        self._set_app_state_uc: SetAppStateUseCase | None = None
        self._command_router: CommandRouter | None = None

    def bootstrap(self) -> None:
        """Startup hook: open the settings store. Call exactly once."""
        SettingsStore.init(
            self._state_manager,
            data_dir=self.data_dir,
            auto_save_interval=self._auto_save_interval,
        )

    def shutdown(self) -> None:
        """Flush the settings store if it was opened."""
        settings = self._state_manager.try_state(SettingsStore)
        if settings is not None:
            settings.close()
            log.info("Settings store closed")

    # --- Paths ---
    @property
    def data_dir(self) -> Path:
        return self._data_dir or get_app_data_dir()

    # --- Shared state ---
    @property
    def state_manager(self) -> StateManager:
        return self._state_manager

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = EventBus()
        return self._event_bus

    # --- Use-cases ---
    @property
    def get_app_state_use_case(self) -> GetAppStateUseCase:
        if self._get_app_state_uc is None:
            self._get_app_state_uc = GetAppStateUseCase(self._state_manager)
        return self._get_app_state_uc

    @property
    def set_app_state_use_case(self) -> SetAppStateUseCase:
        """Writes publish AppStateChanged on the shared event bus."""
        if self._set_app_state_uc is None:
            self._set_app_state_uc = SetAppStateUseCase(
                self._state_manager, event_bus=self.event_bus
            )
        return self._set_app_state_uc

    @property
    def command_router(self) -> CommandRouter:
        if self._command_router is None:
            self._command_router = build_command_router(
                self.get_app_state_use_case, self.set_app_state_use_case
            )
        return self._command_router
