"""Configuration loading for Credo."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from credo.registry.models import DEFAULT_NAME
from credo.registry.rules import COURSE_CAPACITY, STUDENT_CAPACITY

CONFIG_FILE_NAME = "credo.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class CapacityConfig:
    """Enrollment limits."""

    student: int = STUDENT_CAPACITY
    course: int = COURSE_CAPACITY


@dataclass
class SeedConfig:
    """Initial data loaded at startup.

    A ``path`` of None selects the seed file shipped with the package.
    """

    enabled: bool = True
    path: Path | None = None


@dataclass
class ServerConfig:
    """HTTP server settings."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class LoggingConfig:
    """Log output settings. None defers to the CREDO_LOG_* environment variables."""

    dir: str | None = None
    level: str | None = None
    console: bool = True


@dataclass
class CredoConfig:
    """Credo service configuration."""

    university: str = "Credo University"
    default_name: str = DEFAULT_NAME
    capacity: CapacityConfig = field(default_factory=CapacityConfig)
    seed: SeedConfig = field(default_factory=SeedConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> CredoConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Root directory containing the config file. Relative
                       seed paths are resolved against it.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a section is not a mapping, or a capacity or the port is
                out of range.
        """
        capacity_data = _section(data, "capacity")
        capacity = CapacityConfig(
            student=capacity_data.get("student", STUDENT_CAPACITY),
            course=capacity_data.get("course", COURSE_CAPACITY),
        )
        for name, value in (("student", capacity.student), ("course", capacity.course)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"capacity.{name} must be a positive integer, got {value!r}")

        seed_data = _section(data, "seed")
        seed_path = seed_data.get("path")
        seed = SeedConfig(
            enabled=bool(seed_data.get("enabled", True)),
            path=root_path / seed_path if seed_path else None,
        )

        server_data = _section(data, "server")
        port = server_data.get("port", 8000)
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            raise ConfigError(f"server.port must be an integer from 1 to 65535, got {port!r}")
        server = ServerConfig(host=server_data.get("host", "127.0.0.1"), port=port)

        logging_data = _section(data, "logging")
        log_config = LoggingConfig(
            dir=logging_data.get("dir"),
            level=logging_data.get("level"),
            console=bool(logging_data.get("console", True)),
        )

        return cls(
            university=data.get("university", "Credo University"),
            default_name=data.get("default_name", DEFAULT_NAME),
            capacity=capacity,
            seed=seed,
            server=server,
            logging=log_config,
            root_path=root_path,
        )


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return value


def load_config(config_path: Path | str) -> CredoConfig:
    """Load Credo configuration from a YAML file.

    Args:
        config_path: Path to credo.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return CredoConfig.from_dict(data, config_path.parent)


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find credo.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to credo.yaml, or None if there is none.
    """
    start = Path.cwd() if start_path is None else Path(start_path)
    current = start.resolve()

    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
    return None
