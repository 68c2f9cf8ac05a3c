"""Build/version metadata.

SketchDesk is usually run from source (python main.py) and can also be packaged.
Packaged builds get their metadata from environment variables injected at build
time.
"""

from __future__ import annotations

import os

DEFAULT_VERSION = "0.1.0"


def get_build_info() -> dict[str, str]:
    """Return build metadata.

    Environment variables (set by CI/build scripts):
    - SKETCHDESK_VERSION: human readable version, defaults to the package version
    - SKETCHDESK_GIT_SHA: short git sha
    - SKETCHDESK_BUILD_DATE: ISO date (YYYY-MM-DD)
    """

    return {
        "version": os.getenv("SKETCHDESK_VERSION", DEFAULT_VERSION),
        "git_sha": os.getenv("SKETCHDESK_GIT_SHA", "dev"),
        "build_date": os.getenv("SKETCHDESK_BUILD_DATE", ""),
    }


def get_version_string() -> str:
    info = get_build_info()
    ver = info["version"].strip() or DEFAULT_VERSION
    sha = info["git_sha"].strip() or "dev"
    date = info["build_date"].strip()
    if date:
        return f"v{ver} ({sha}, {date})"
    return f"v{ver} ({sha})"
