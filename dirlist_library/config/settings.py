"""Settings model for the dirlistd daemon.

Contract:
- Inputs: Environment variables, YAML values
- Outputs: Frozen, validated settings object
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from ..rendering import SERVER_INFO


class DirlistSettings(BaseSettings):
    """Configuration for dirlistd.

    Attributes:
        host: Listen address (default: 127.0.0.1)
        port: Listen port (default: 8421)
        log_level: Logging level (default: info)
        workers: Number of workers (default: 1)
        data_path: Directory exposed for browsing (default: /data)
        include_parent: Show a "../" row below the data root (default: True)
        escape_html: HTML-escape names in rendered pages (default: True)
        server_info: Footer text of HTML pages

    Example:
        >>> settings = DirlistSettings()
        >>> assert settings.port == 8421
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRLISTD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    host: str = "127.0.0.1"
    port: int = 8421
    log_level: str = "info"
    workers: int = 1

    data_path: str = "/data"

    include_parent: bool = True
    escape_html: bool = True
    server_info: str = SERVER_INFO

    @field_validator("data_path")
    @classmethod
    def expand_and_resolve_path(cls, v: str) -> str:
        """Expand ~ and resolve to absolute path."""
        return str(Path(v).expanduser().resolve())
