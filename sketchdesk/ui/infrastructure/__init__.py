"""Infrastructure: application bootstrap and the web channel bridge.

Keep this package import lightweight: do not import Qt GUI modules at import time.
Some headless CI environments have PySide6 installed but miss runtime GUI libs
(e.g. ``libGL.so.1``). Lazy exports below allow importing
``sketchdesk.ui.infrastructure.bridge`` without triggering Qt GUI initialization.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "AppStateBridge",
    "create_application",
    "run_application",
]


def __getattr__(name: str) -> Any:
    if name in ("create_application", "run_application"):
        return getattr(import_module("sketchdesk.ui.infrastructure.application"), name)
    if name == "AppStateBridge":
        return import_module("sketchdesk.ui.infrastructure.bridge").AppStateBridge
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
