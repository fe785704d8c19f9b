"""Configuration management for dpp-http.toml."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli
import tomli_w

from dpp_http.exceptions import ConfigNotFoundError, ConfigParseError, ConfigValidationError

CONFIG_FILENAME = "dpp-http.toml"
DEFAULT_BASE_PATH = "~/.cache/dpp"

BASE_PATH_ENV = "DPP_BASE_PATH"
TEMP_DIR_ENV = "DPP_HTTP_TMPDIR"


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigValidationError(
            f"'http.{key}' must be a string, got {type(value).__name__}"
        )
    return value


@dataclass
class HttpConfig:
    """Configuration from dpp-http.toml.

    Example:
        [http]
        base_path = "~/.cache/dpp"
        temp_dir = "/var/tmp"
    """

    path: Path | None = None
    base_path: str = DEFAULT_BASE_PATH
    temp_dir: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def resolved_base_path(self) -> str:
        """Base path with ``~`` expanded."""
        return os.path.expanduser(self.base_path)

    @classmethod
    def load(cls, path: Path) -> "HttpConfig":
        """Load configuration from dpp-http.toml.

        Args:
            path: Path to the dpp-http.toml file

        Returns:
            Parsed HttpConfig

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            ConfigParseError: If the file cannot be parsed
            ConfigValidationError: If the configuration is invalid
        """
        if not path.exists():
            raise ConfigNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "rb") as f:
                data = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ConfigParseError(f"Failed to parse {path}: {e}")

        return cls._from_dict(path, data)

    @classmethod
    def _from_dict(cls, path: Path | None, data: dict[str, Any]) -> "HttpConfig":
        """Create an HttpConfig from a parsed TOML dict."""
        http = data.get("http", {})
        if not isinstance(http, dict):
            raise ConfigValidationError(
                f"'http' must be a table, got {type(http).__name__}"
            )

        config = cls(path=path)
        base_path = _optional_str(http, "base_path")
        if base_path is not None:
            if not base_path:
                raise ConfigValidationError("'http.base_path' cannot be empty")
            config.base_path = base_path
        config.temp_dir = _optional_str(http, "temp_dir") or None
        config.extra = {k: v for k, v in data.items() if k != "http"}
        return config

    def with_env(self, environ: Mapping[str, str] | None = None) -> "HttpConfig":
        """Return a copy with environment overrides applied."""
        env = environ if environ is not None else os.environ
        return HttpConfig(
            path=self.path,
            base_path=env.get(BASE_PATH_ENV) or self.base_path,
            temp_dir=env.get(TEMP_DIR_ENV) or self.temp_dir,
            extra=dict(self.extra),
        )

    def save(self, path: Path | None = None) -> None:
        """Save configuration to dpp-http.toml."""
        target = path or self.path
        if target is None:
            raise ConfigValidationError("No path to save configuration to")
        with open(target, "wb") as f:
            tomli_w.dump(self._to_dict(), f)
        self.path = target

    def _to_dict(self) -> dict[str, Any]:
        """Convert to a TOML-serializable dict."""
        http: dict[str, Any] = {"base_path": self.base_path}
        if self.temp_dir:
            http["temp_dir"] = self.temp_dir
        data: dict[str, Any] = dict(self.extra)
        data["http"] = http
        return data


def load_config(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> HttpConfig:
    """Load configuration with environment overrides applied.

    An explicit ``path`` must exist. Without one, ``dpp-http.toml`` in the
    current directory is used when present, else the defaults.
    """
    if path is not None:
        config = HttpConfig.load(path)
    else:
        candidate = Path.cwd() / CONFIG_FILENAME
        config = HttpConfig.load(candidate) if candidate.exists() else HttpConfig()
    return config.with_env(environ)
