"""
QApplication setup: High DPI, organization and app name.
"""

from __future__ import annotations

import sys
from typing import NoReturn

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from sketchdesk.config import APP_NAME, APP_ORGANIZATION
from sketchdesk.core.version import get_build_info


def create_application(argv: list[str] | None = None) -> QApplication:
    """Create and configure QApplication. Call before any Qt widgets."""
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setApplicationVersion(get_build_info()["version"])
    return app


def run_application(app: QApplication) -> NoReturn:
    """Run the event loop. Does not return until app quits."""
    sys.exit(app.exec())
