"""Configuration utilities for projkt.

Constants and environment-driven path resolution. There is no config file;
the two overridable settings are read from the environment.
"""

from __future__ import annotations

import os
import sys
from datetime import timedelta
from pathlib import Path


APP_NAME = "projkt"

# Fixed, not user configurable. The boundary is inclusive.
CACHE_TTL = timedelta(days=7)

GITIGNORE_CACHE_FILE = "gitignore.json"

DEFAULT_GITIGNORE_URL = "https://www.toptal.com/developers/gitignore/api/list?format=json"

# Seconds
HTTP_TIMEOUT = 30


def _platform_cache_base() -> Path:
    """Get the platform cache directory.

    - Windows: %LOCALAPPDATA%
    - macOS: ~/Library/Caches
    - Linux: $XDG_CACHE_HOME, or ~/.cache
    """
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA")
        if base:
            return Path(base)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches"
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".cache"


def get_cache_dir() -> Path:
    """Get the projkt cache directory.

    ``PROJKT_CACHE_DIR`` replaces the platform cache directory when set;
    the application name is appended in both cases.

    Example:
        >>> from projkt.config import get_cache_dir
        >>> path = get_cache_dir() / GITIGNORE_CACHE_FILE
    """
    override = (os.environ.get("PROJKT_CACHE_DIR") or "").strip()
    base = Path(override).expanduser() if override else _platform_cache_base()
    return base / APP_NAME


def gitignore_cache_path() -> Path:
    """Default location of the cached gitignore catalog."""
    return get_cache_dir() / GITIGNORE_CACHE_FILE


def gitignore_catalog_url() -> str:
    return (os.environ.get("PROJKT_GITIGNORE_URL") or DEFAULT_GITIGNORE_URL).strip()
