"""Command boundary between the web front-end and the application layer.

Commands are addressed by name and exchange JSON-compatible values, mirroring
how the front-end calls into the host::

    invoke("get_app_state")                        -> {"theme": "light", ...}
    invoke("set_app_state", {"newState": {...}})   -> None

``invoke_json`` wraps results and :class:`AppError` failures into an envelope
(``{"ok": true, "data": ...}`` / ``{"ok": false, "error": {...}}``) so the
Qt bridge can hand plain strings across the web channel.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from sketchdesk.application.use_cases.app_state import (
    GetAppStateUseCase,
    SetAppStateRequest,
    SetAppStateUseCase,
)
from sketchdesk.core.errors import AppError, CommandNotFoundError, ValidationError
from sketchdesk.features.app_state import AppState

log = logging.getLogger(__name__)

CommandHandler = Callable[[Mapping[str, Any]], Any]

GET_APP_STATE = "get_app_state"
SET_APP_STATE = "set_app_state"


class CommandRouter:
    """Name -> handler table. Handlers receive the argument object."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        if name in self._handlers:
            raise ValueError(f"Command '{name}' already registered")
        self._handlers[name] = handler

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def invoke(self, name: str, args: Mapping[str, Any] | None = None) -> Any:
        handler = self._handlers.get(name)
        if handler is None:
            raise CommandNotFoundError(f"Unknown command '{name}'")
        if args is None:
            args = {}
        if not isinstance(args, Mapping):
            raise ValidationError(
                f"Arguments for '{name}' must be an object, got {type(args).__name__}"
            )
        return handler(args)

    def invoke_json(self, name: str, args_json: str = "", *, wrap_as: str | None = None) -> str:
        """Decode *args_json*, invoke, and return the JSON envelope.

        With *wrap_as* the decoded value becomes the single argument of that
        name (``setAppState(state)`` -> ``{"newState": state}``).
        """
        try:
            args = json.loads(args_json) if args_json.strip() else None
            if wrap_as is not None:
                args = {wrap_as: args}
            data = self.invoke(name, args)
        except json.JSONDecodeError as e:
            return _error_envelope(
                name, ValidationError(f"Arguments for '{name}' are not valid JSON", cause=e)
            )
        except AppError as e:
            return _error_envelope(name, e)
        return json.dumps({"ok": True, "data": data}, ensure_ascii=False)


def _error_envelope(name: str, error: AppError) -> str:
    log.warning("Command %s failed: %s", name, error, extra={"command": name})
    return json.dumps(
        {"ok": False, "error": {"kind": error.kind, "message": str(error)}},
        ensure_ascii=False,
    )


def build_command_router(
    get_app_state: GetAppStateUseCase, set_app_state: SetAppStateUseCase
) -> CommandRouter:
    """Router exposing the two settings commands."""
    router = CommandRouter()

    def _get(_args: Mapping[str, Any]) -> dict[str, Any]:
        return get_app_state.execute().to_dict()

    def _set(args: Mapping[str, Any]) -> None:
        if "newState" not in args:
            raise ValidationError(f"'{SET_APP_STATE}' requires a 'newState' argument")
        set_app_state.execute(SetAppStateRequest(AppState.parse(args["newState"])))

    router.register(GET_APP_STATE, _get)
    router.register(SET_APP_STATE, _set)
    return router
