"""Application configuration and constants.

Holds the application identity (used for the data directory and QSettings-style
names), the settings file name and the auto-save interval of the settings store.
"""

# Identity
APP_NAME = "SketchDesk"
APP_ORGANIZATION = "SketchDesk"
APP_IDENTIFIER = "io.sketchdesk.app"

# Settings store
SETTINGS_FILE_NAME = "settings.json"
AUTO_SAVE_INTERVAL_SEC = 30.0  # debounce: flush 30 s after the last change

# Front-end (dev server of the web UI)
DEFAULT_FRONTEND_URL = "http://localhost:1420"
