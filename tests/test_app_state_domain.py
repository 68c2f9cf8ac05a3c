from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

import pytest

from sketchdesk.core.errors import ValidationError
from sketchdesk.features.app_state import STORE_KEYS, AppState, Theme


class _DictStore(dict):
    """Minimal KeyValueStore: a plain dict already has ``get`` and ``update``."""


_ATTR_BY_KEY = {
    "theme": "theme",
    "defaultSidebarDockedPreference": "default_sidebar_docked_preference",
    "viewModeEnabled": "view_mode_enabled",
    "zenModeEnabled": "zen_mode_enabled",
}

# Every field differs from its default.
_NON_DEFAULT_DOC = {
    "theme": "dark",
    "defaultSidebarDockedPreference": False,
    "viewModeEnabled": True,
    "zenModeEnabled": True,
}
_NON_DEFAULT_STATE = AppState(
    theme=Theme.DARK,
    default_sidebar_docked_preference=False,
    view_mode_enabled=True,
    zen_mode_enabled=True,
)


class TestDecode:
    def test_empty_store_gives_defaults(self) -> None:
        state = AppState.from_store(_DictStore())
        assert state == AppState(
            theme=Theme.LIGHT,
            default_sidebar_docked_preference=True,
            view_mode_enabled=False,
            zen_mode_enabled=False,
        )

    def test_full_document(self) -> None:
        assert AppState.from_store(_DictStore(_NON_DEFAULT_DOC)) == _NON_DEFAULT_STATE

    @pytest.mark.parametrize("key", STORE_KEYS)
    def test_missing_key_uses_default_silently(
        self, key: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        doc = dict(_NON_DEFAULT_DOC)
        del doc[key]
        attr = _ATTR_BY_KEY[key]

        state = AppState.from_store(_DictStore(doc))

        assert state == replace(_NON_DEFAULT_STATE, **{attr: getattr(AppState(), attr)})
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    @pytest.mark.parametrize(
        ("key", "bad_value"),
        [
            ("theme", "purple"),
            ("theme", 3),
            ("theme", None),
            ("defaultSidebarDockedPreference", "yes"),
            ("viewModeEnabled", 1),
            ("viewModeEnabled", "maybe"),
            ("zenModeEnabled", None),
            ("zenModeEnabled", {"on": True}),
        ],
    )
    def test_malformed_value_falls_back_and_warns(
        self, key: str, bad_value: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        doc = dict(_NON_DEFAULT_DOC)
        doc[key] = bad_value
        attr = _ATTR_BY_KEY[key]

        with caplog.at_level(logging.WARNING):
            state = AppState.from_store(_DictStore(doc))

        # Only the broken field falls back; the others decode independently.
        assert state == replace(_NON_DEFAULT_STATE, **{attr: getattr(AppState(), attr)})
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        message = warnings[0].getMessage()
        assert key in message
        assert repr(bad_value) in message

    def test_partial_document(self) -> None:
        state = AppState.from_store(_DictStore({"zenModeEnabled": True}))
        assert state == AppState(
            theme=Theme.LIGHT,
            default_sidebar_docked_preference=True,
            view_mode_enabled=False,
            zen_mode_enabled=True,
        )

    def test_everything_malformed_gives_defaults(self) -> None:
        doc = {key: "garbage" for key in STORE_KEYS}
        assert AppState.from_store(_DictStore(doc)) == AppState()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("light", Theme.LIGHT), ("Dark", Theme.DARK), ("SYSTEM", Theme.SYSTEM)],
    )
    def test_theme_names_are_case_insensitive(self, raw: str, expected: Theme) -> None:
        assert AppState.from_store(_DictStore({"theme": raw})).theme is expected

    def test_unknown_keys_are_ignored(self) -> None:
        state = AppState.from_store(_DictStore({"theme": "dark", "unrelatedKey": 42}))
        assert state == AppState(theme=Theme.DARK)


class TestEncode:
    def test_writes_all_four_keys(self) -> None:
        store = _DictStore()
        _NON_DEFAULT_STATE.store(store)
        assert store == _NON_DEFAULT_DOC

    def test_theme_is_written_as_text(self) -> None:
        store = _DictStore()
        AppState(theme=Theme.SYSTEM).store(store)
        assert store["theme"] == "system"
        assert type(store["theme"]) is str

    def test_leaves_other_keys_alone(self) -> None:
        store = _DictStore({"unrelatedKey": 42, "theme": "dark"})
        AppState().store(store)
        assert store["unrelatedKey"] == 42
        assert store["theme"] == "light"

    def test_to_dict_uses_store_keys(self) -> None:
        assert AppState().to_dict() == {
            "theme": "light",
            "defaultSidebarDockedPreference": True,
            "viewModeEnabled": False,
            "zenModeEnabled": False,
        }


class TestParse:
    def test_accepts_complete_payload(self) -> None:
        assert AppState.parse(_NON_DEFAULT_DOC) == _NON_DEFAULT_STATE

    def test_ignores_extra_keys(self) -> None:
        payload = dict(_NON_DEFAULT_DOC, name="Untitled-1")
        assert AppState.parse(payload) == _NON_DEFAULT_STATE

    def test_rejects_non_object(self) -> None:
        with pytest.raises(ValidationError):
            AppState.parse(["light", True, False, False])

    def test_reports_every_problem(self) -> None:
        payload = {"theme": "neon", "viewModeEnabled": "no", "zenModeEnabled": False}
        with pytest.raises(ValidationError) as exc_info:
            AppState.parse(payload)
        message = exc_info.value.message
        assert "theme" in message
        assert "viewModeEnabled" in message
        assert "defaultSidebarDockedPreference" in message
        assert "zenModeEnabled" not in message
