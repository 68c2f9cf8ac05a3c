"""App shell: main window hosting the web front-end."""

from sketchdesk.ui.shell.main_window import BRIDGE_OBJECT_NAME, MainWindow

__all__ = ["BRIDGE_OBJECT_NAME", "MainWindow"]
