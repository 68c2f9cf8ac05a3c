from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sketchdesk.features.app_state.domain import AppState


@dataclass(frozen=True, slots=True)
class AppStateChanged:
    """Published after a new AppState was written into the settings store."""

    state: AppState
