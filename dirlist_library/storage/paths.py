"""Where dirlistd keeps its own files.

Only the config directory is needed: listings are never persisted.
DIRLISTD_HOME (default ./.dirlistd) holds config/dirlistd.yaml unless
DIRLISTD_CONFIG_DIR points somewhere else.
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Resolved DIRLISTD_HOME, default ".dirlistd" under the cwd."""
    return Path(os.environ.get("DIRLISTD_HOME", ".dirlistd")).resolve()


def get_config_dir() -> Path:
    """Directory holding dirlistd.yaml, created on first use."""
    override = os.environ.get("DIRLISTD_CONFIG_DIR")
    config_dir = Path(override).resolve() if override is not None else get_home_dir() / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir
