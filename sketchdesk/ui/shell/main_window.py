"""
Main window: hosts the web front-end and publishes the settings bridge on a QWebChannel.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QUrl
from PySide6.QtGui import QCloseEvent
from PySide6.QtWebChannel import QWebChannel
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QMainWindow

from sketchdesk.config import APP_NAME
from sketchdesk.core.version import get_version_string
from sketchdesk.ui.infrastructure.bridge import AppStateBridge

if TYPE_CHECKING:
    from sketchdesk.application.container import Container

BRIDGE_OBJECT_NAME = "settings"


class MainWindow(QMainWindow):
    """Single web view; the page reaches the host only through the bridge."""

    def __init__(self, container: Container, url: str) -> None:
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} {get_version_string()}")
        self.setMinimumSize(800, 600)
        self.resize(1280, 800)

        self._bridge = AppStateBridge(container.command_router, container.event_bus, parent=self)
        self._channel = QWebChannel(self)
        self._channel.registerObject(BRIDGE_OBJECT_NAME, self._bridge)

        self._view = QWebEngineView(self)
        self._view.page().setWebChannel(self._channel)
        self._view.setUrl(QUrl(url))
        self.setCentralWidget(self._view)

    @property
    def bridge(self) -> AppStateBridge:
        return self._bridge

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self._bridge.detach()
        super().closeEvent(event)
