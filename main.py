"""
Entry point for the SketchDesk desktop shell.

Run: python main.py [--url URL] [--data-dir DIR]
Requires: pip install -e .

Opens the settings store, then a window hosting the web front-end with the
settings bridge on a QWebChannel. Pending settings are flushed on quit.
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from sketchdesk.application.container import Container
from sketchdesk.config import DEFAULT_FRONTEND_URL
from sketchdesk.core.observability.logging_config import setup_logging
from sketchdesk.core.version import get_version_string


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sketchdesk", description="SketchDesk desktop shell")
    parser.add_argument(
        "--url",
        default=os.getenv("SKETCHDESK_FRONTEND_URL", DEFAULT_FRONTEND_URL),
        help="front-end URL to load (default: %(default)s)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="directory for settings.json and logs (default: OS user data dir)",
    )
    parser.add_argument("--version", action="version", version=get_version_string())
    # Qt consumes its own flags (-platform, -style, ...) from the remaining argv.
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(data_dir=args.data_dir)

    container = Container(data_dir=args.data_dir)
    container.bootstrap()

    from sketchdesk.ui.infrastructure import create_application, run_application
    from sketchdesk.ui.shell import MainWindow

    app = create_application()
    app.aboutToQuit.connect(container.shutdown)

    window = MainWindow(container, args.url)
    window.show()

    run_application(app)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
