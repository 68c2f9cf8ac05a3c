from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterator
from pathlib import Path

import pytest

from sketchdesk.application.use_cases import (
    GetAppStateUseCase,
    SetAppStateRequest,
    SetAppStateUseCase,
    get_app_state,
    set_app_state,
)
from sketchdesk.core.errors import StateNotManagedError
from sketchdesk.core.events import AppStateChanged, EventBus
from sketchdesk.core.state import StateManager
from sketchdesk.features.app_state import AppState, SettingsStore, Theme


@pytest.fixture
def manager(tmp_path: Path) -> Iterator[StateManager]:
    m = StateManager()
    # No timer: tests flush explicitly through close().
    SettingsStore.init(m, data_dir=tmp_path, auto_save_interval=None)
    yield m
    SettingsStore.from_manager(m).close()


def _read_settings(tmp_path: Path) -> dict:
    return json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))


def test_defaults_before_any_write(manager: StateManager) -> None:
    assert get_app_state(manager) == AppState()


@pytest.mark.parametrize(
    "state",
    [
        AppState(),
        AppState(theme=Theme.DARK, view_mode_enabled=True),
        AppState(
            theme=Theme.SYSTEM,
            default_sidebar_docked_preference=False,
            view_mode_enabled=True,
            zen_mode_enabled=True,
        ),
    ],
)
def test_set_then_get_returns_same_state(manager: StateManager, state: AppState) -> None:
    set_app_state(manager, state)
    assert get_app_state(manager) == state


def test_setting_twice_is_idempotent(manager: StateManager) -> None:
    state = AppState(theme=Theme.DARK, zen_mode_enabled=True)

    set_app_state(manager, state)
    set_app_state(manager, state)

    assert get_app_state(manager) == state


def test_concurrent_reader_never_sees_a_mixed_state(manager: StateManager) -> None:
    first = AppState()
    second = AppState(
        theme=Theme.DARK,
        default_sidebar_docked_preference=False,
        view_mode_enabled=True,
        zen_mode_enabled=True,
    )
    done = threading.Event()

    def writer() -> None:
        try:
            for i in range(500):
                set_app_state(manager, second if i % 2 else first)
        finally:
            done.set()

    seen: list[AppState] = []
    thread = threading.Thread(target=writer)
    thread.start()
    while not done.is_set():
        seen.append(get_app_state(manager))
    thread.join()

    assert all(state in (first, second) for state in seen)


def test_write_is_visible_before_it_reaches_disk(
    manager: StateManager, tmp_path: Path
) -> None:
    state = AppState(theme=Theme.DARK)

    set_app_state(manager, state)

    assert not (tmp_path / "settings.json").exists()
    assert get_app_state(manager) == state

    SettingsStore.from_manager(manager).close()
    assert _read_settings(tmp_path) == {
        "theme": "dark",
        "defaultSidebarDockedPreference": True,
        "viewModeEnabled": False,
        "zenModeEnabled": False,
    }


def test_unrelated_keys_are_preserved(tmp_path: Path) -> None:
    (tmp_path / "settings.json").write_text(
        '{"theme": "dark", "unrelatedKey": 42}', encoding="utf-8"
    )
    m = StateManager()
    SettingsStore.init(m, data_dir=tmp_path, auto_save_interval=None)

    set_app_state(m, AppState(theme=Theme.LIGHT, view_mode_enabled=True))
    SettingsStore.from_manager(m).close()

    data = _read_settings(tmp_path)
    assert data["unrelatedKey"] == 42
    assert data["theme"] == "light"
    assert data["viewModeEnabled"] is True


def test_get_repairs_nothing_on_disk(tmp_path: Path) -> None:
    (tmp_path / "settings.json").write_text('{"theme": "neon"}', encoding="utf-8")
    m = StateManager()
    SettingsStore.init(m, data_dir=tmp_path, auto_save_interval=None)

    assert get_app_state(m) == AppState()
    assert not SettingsStore.from_manager(m).inner.is_dirty


def test_operations_fail_before_init(tmp_path: Path) -> None:
    m = StateManager()

    with pytest.raises(StateNotManagedError):
        get_app_state(m)
    with pytest.raises(StateNotManagedError):
        set_app_state(m, AppState(theme=Theme.DARK))

    assert list(tmp_path.iterdir()) == []


def test_set_logs_new_state(manager: StateManager, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="sketchdesk")

    set_app_state(manager, AppState(theme=Theme.DARK))

    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert any(m.startswith("set_app_state:") and "DARK" in m for m in messages)


def test_set_publishes_event(manager: StateManager) -> None:
    bus = EventBus()
    received: list[AppStateChanged] = []
    bus.subscribe(AppStateChanged, received.append)
    state = AppState(zen_mode_enabled=True)

    set_app_state(manager, state, event_bus=bus)

    assert received == [AppStateChanged(state=state)]


def test_use_case_classes(manager: StateManager) -> None:
    bus = EventBus()
    received: list[AppStateChanged] = []
    bus.subscribe(AppStateChanged, received.append)
    state = AppState(theme=Theme.SYSTEM)

    SetAppStateUseCase(manager, event_bus=bus).execute(SetAppStateRequest(state))

    assert GetAppStateUseCase(manager).execute() == state
    assert len(received) == 1
