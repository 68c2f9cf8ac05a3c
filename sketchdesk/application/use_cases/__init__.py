from .app_state import (
    GetAppStateUseCase,
    SetAppStateRequest,
    SetAppStateUseCase,
    get_app_state,
    set_app_state,
)

__all__ = [
    "GetAppStateUseCase",
    "SetAppStateRequest",
    "SetAppStateUseCase",
    "get_app_state",
    "set_app_state",
]
