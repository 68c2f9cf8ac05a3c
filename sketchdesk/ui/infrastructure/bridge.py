"""
Web channel bridge: exposes the settings commands to the JavaScript front-end.

Registered on a QWebChannel under ``"settings"``; the page calls
``settings.getAppState()`` / ``settings.setAppState(json)`` and listens to
``settings.appStateChanged``. Payloads are JSON strings in the
``{"ok": ..., "data"|"error": ...}`` envelope produced by CommandRouter.
"""

from __future__ import annotations

import json

from PySide6.QtCore import QObject, Signal, Slot

from sketchdesk.application.commands import GET_APP_STATE, SET_APP_STATE, CommandRouter
from sketchdesk.core.events import AppStateChanged, EventBus, Subscription


class AppStateBridge(QObject):
    """QObject facade over CommandRouter. Signals may be emitted from any thread."""

    appStateChanged = Signal(str)  # JSON object of the new AppState

    def __init__(
        self,
        router: CommandRouter,
        event_bus: EventBus | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._router = router
        self._bus = event_bus
        self._subscription: Subscription | None = None
        if event_bus is not None:
            self._subscription = event_bus.subscribe(AppStateChanged, self._on_app_state_changed)

    @Slot(result=str)
    def getAppState(self) -> str:  # noqa: N802
        return self._router.invoke_json(GET_APP_STATE)

    @Slot(str, result=str)
    def setAppState(self, new_state_json: str) -> str:  # noqa: N802
        return self._router.invoke_json(SET_APP_STATE, new_state_json, wrap_as="newState")

    @Slot(str, str, result=str)
    def invoke(self, command: str, args_json: str) -> str:
        return self._router.invoke_json(command, args_json)

    def detach(self) -> None:
        """Stop forwarding events (call before the bridge is destroyed)."""
        if self._bus is not None and self._subscription is not None:
            self._bus.unsubscribe(self._subscription)
            self._subscription = None

    def _on_app_state_changed(self, event: AppStateChanged) -> None:
        self.appStateChanged.emit(json.dumps(event.state.to_dict()))
