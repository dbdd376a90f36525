"""Load DirlistSettings from dirlistd.yaml and DIRLISTD_* variables.

The first load writes a commented default dirlistd.yaml into the config
directory. Environment variables win over the file.
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import DirlistSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "DIRLISTD_"

DEFAULT_CONFIG = """# dirlistd configuration

# Server settings
host: "127.0.0.1"
port: 8421
log_level: "info"
workers: 1

# Directory exposed for browsing
# Can be overridden with DIRLISTD_DATA_PATH environment variable
# Supports: absolute paths (/data), ~ for home directory (~), relative paths (./data)
# data_path: "/data"

# Listing output
include_parent: true
escape_html: true
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to dirlistd.yaml in config directory
    """
    return get_config_dir() / "dirlistd.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist."""
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> DirlistSettings:
    """Load configuration from YAML and environment.

    Precedence is defaults < YAML < environment variables
    (prefixed with DIRLISTD_, e.g. DIRLISTD_PORT).

    Args:
        config_path: Optional config file path (default: dirlistd.yaml in config dir)

    Returns:
        Validated settings

    Raises:
        pydantic.ValidationError: If a value has the wrong type
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    # Only pass YAML values that don't have corresponding env vars
    filtered_yaml = {
        key: value for key, value in yaml_settings.items() if f"{ENV_PREFIX}{key.upper()}" not in os.environ
    }

    settings = DirlistSettings(**filtered_yaml)

    logger.info(
        f"Configuration loaded: host={settings.host}, port={settings.port}, data_path={settings.data_path}"
    )

    return settings
