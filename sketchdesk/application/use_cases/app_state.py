"""Use-cases for reading and writing the persisted application state.

``get_app_state`` projects an :class:`AppState` from the settings store on every
call; ``set_app_state`` overwrites the four keys. Nothing is cached in between,
the store is the single source of truth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sketchdesk.core.events import AppStateChanged, EventBus
from sketchdesk.core.state import StateManager
from sketchdesk.features.app_state import AppState, SettingsStore

log = logging.getLogger(__name__)


def get_app_state(manager: StateManager) -> AppState:
    """Return the current state; defaults for anything missing or malformed.

    Raises StateNotManagedError if the settings store was never initialized.
    """
    settings = SettingsStore.from_manager(manager)
    with settings.locked():
        return AppState.from_store(settings)


def set_app_state(
    manager: StateManager, new_state: AppState, *, event_bus: EventBus | None = None
) -> None:
    """Write *new_state* into the settings store.

    Visible to the next ``get_app_state`` immediately; reaches disk with the
    next auto-save (or on shutdown). Raises StateNotManagedError, before
    writing anything, if the settings store was never initialized.
    """
    settings = SettingsStore.from_manager(manager)
    new_state.store(settings)
    log.info("set_app_state: %s", new_state)
    if event_bus is not None:
        event_bus.publish(AppStateChanged(state=new_state))


@dataclass(frozen=True, slots=True)
class SetAppStateRequest:
    state: AppState


class GetAppStateUseCase:
    def __init__(self, manager: StateManager) -> None:
        self._manager = manager

    def execute(self) -> AppState:
        return get_app_state(self._manager)


class SetAppStateUseCase:
    def __init__(self, manager: StateManager, *, event_bus: EventBus | None = None) -> None:
        self._manager = manager
        self._bus = event_bus

    def execute(self, request: SetAppStateRequest) -> None:
        set_app_state(self._manager, request.state, event_bus=self._bus)
