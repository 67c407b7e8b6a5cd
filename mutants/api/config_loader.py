"""Configuration loading for the mutant detector API.

Settings come from three layers, later ones winning:

1. Built-in defaults (the dataclasses below)
2. An optional JSON file, e.g. ``config/mutants.json``
3. Environment variables (``MUTANTS_*``), typically provided through ``.env``

CLI flags in ``main`` are applied on top of the returned config.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class StorageConfig:
    records_path: str = "data/dna_records.jsonl"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    startup_log_dir: str | None = "logs/startup"
    startup_capacity: int = 500


@dataclass
class AppConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        server = _section(data, "server")
        storage = _section(data, "storage")
        log = _section(data, "logging")
        defaults = cls()
        try:
            return cls(
                server=ServerConfig(
                    host=str(server.get("host", defaults.server.host)),
                    port=int(server.get("port", defaults.server.port)),
                ),
                storage=StorageConfig(
                    records_path=str(
                        storage.get("records_path", defaults.storage.records_path)
                    ),
                ),
                logging=LoggingConfig(
                    level=str(log.get("level", defaults.logging.level)),
                    startup_log_dir=log.get(
                        "startup_log_dir", defaults.logging.startup_log_dir
                    ),
                    startup_capacity=int(
                        log.get("startup_capacity", defaults.logging.startup_capacity)
                    ),
                ),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid configuration value: {exc}") from exc


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, Mapping):
        raise ValueError(f"Configuration section '{name}' must be an object")
    return section


def apply_env_overrides(
    config: AppConfig, environ: Mapping[str, str] | None = None
) -> AppConfig:
    env = os.environ if environ is None else environ
    if env.get("MUTANTS_HOST"):
        config.server.host = env["MUTANTS_HOST"]
    if env.get("MUTANTS_PORT"):
        try:
            config.server.port = int(env["MUTANTS_PORT"])
        except ValueError as exc:
            raise ValueError(f"MUTANTS_PORT must be an integer: {exc}") from exc
    if env.get("MUTANTS_RECORDS_PATH"):
        config.storage.records_path = env["MUTANTS_RECORDS_PATH"]
    if env.get("MUTANTS_LOG_LEVEL"):
        config.logging.level = env["MUTANTS_LOG_LEVEL"]
    return config


def load_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Build the application config from defaults, ``path`` and the environment.

    Raises:
        FileNotFoundError: ``path`` was given but does not exist.
        ValueError: the file is not valid JSON or holds invalid values.
    """
    if path is None:
        config = AppConfig()
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(config_path)
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {config_path} must be a JSON object")
        config = AppConfig.from_dict(data)
        logger.info("Loaded configuration from %s", config_path)
    return apply_env_overrides(config, environ)


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ServerConfig",
    "StorageConfig",
    "apply_env_overrides",
    "load_config",
]
