"""
Configuration Management.

Loads CLI settings from the config home and the environment.
No hardcoded values in commands: targets, timeouts and logging all come
from these sources.

Config home:
    $VESPA_CLI_HOME if set, otherwise ~/.vespa

Settings (YAML, all optional):
    config.yaml   - Default target, application and HTTP timeout
    logging.yaml  - Logging configuration

Environment (VESPA_CLI_ prefix):
    VESPA_CLI_HOME, VESPA_CLI_TARGET, VESPA_CLI_TIMEOUT

Precedence for every value: command-line flag, environment, config.yaml,
built-in default.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from vespa_cli.core.config_schema import CliConfigSchema, LoggingSchema
from vespa_cli.core.exceptions import ConfigError

CONFIG_FILENAME = "config.yaml"
LOGGING_FILENAME = "logging.yaml"

LOCAL_CONTAINER_URL = "http://127.0.0.1:8080"
LOCAL_CONFIG_SERVER_URL = "http://127.0.0.1:19071"

CONFIGURABLE_OPTIONS = ("target", "application")


class ServiceKind(str, Enum):
    """The service roles a target resolves to."""

    QUERY = "query"
    DOCUMENT = "document"
    DEPLOY = "deploy"


class Settings(BaseSettings):
    """Overrides read from VESPA_CLI_* environment variables."""

    home: Path | None = None
    target: str | None = None
    timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="VESPA_CLI_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings."""
    return Settings()


def find_config_home() -> Path:
    """Return the directory holding config.yaml and logging.yaml."""
    home = get_settings().home
    if home is not None:
        return home
    return Path.home() / ".vespa"


def load_yaml_config(filename: str) -> dict[str, Any]:
    """
    Load a YAML file from the config home.

    A missing file is not an error for a CLI: it yields an empty dict so
    that schema defaults apply.

    Raises:
        ConfigError: If the file exists but is not a YAML mapping
    """
    config_path = find_config_home() / filename
    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read configuration file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {config_path} must contain a mapping")
    return data


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {filename}:\n{e}") from e


class CliConfig:
    """
    CLI configuration loaded from the YAML files in the config home.

    Each file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._cli = _load_validated(CliConfigSchema, CONFIG_FILENAME)
        self._logging = _load_validated(LoggingSchema, LOGGING_FILENAME)

    @property
    def cli(self) -> CliConfigSchema:
        """Target, application and timeout settings."""
        return self._cli

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_cli_config() -> CliConfig:
    """Get cached CLI configuration."""
    return CliConfig()


def clear_config_cache() -> None:
    """Forget cached settings so the next access reloads them."""
    get_settings.cache_clear()
    get_cli_config.cache_clear()


def effective_target(flag_value: str | None = None) -> str:
    """Pick the target name or URL from flag, environment or config.yaml."""
    if flag_value:
        return flag_value
    env_target = get_settings().target
    if env_target:
        return env_target
    return get_cli_config().cli.target


def effective_timeout() -> float:
    """HTTP timeout in seconds from environment or config.yaml."""
    env_timeout = get_settings().timeout
    if env_timeout is not None:
        return env_timeout
    return get_cli_config().cli.timeout


def is_url(value: str) -> bool:
    """True for an http(s) URL that names a host."""
    parts = urlsplit(value)
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def resolve_target(target: str, kind: ServiceKind) -> str:
    """
    Resolve a target name or URL to the base URL of one service.

    Args:
        target: "local" or an http(s) URL
        kind: Which service of the target to address

    Returns:
        Base URL without trailing slash

    Raises:
        ConfigError: If the target is neither "local" nor a URL
    """
    if target == "local":
        if kind is ServiceKind.DEPLOY:
            return LOCAL_CONFIG_SERVER_URL
        return LOCAL_CONTAINER_URL
    if is_url(target):
        return target.rstrip("/")
    raise ConfigError(
        f"Invalid target '{target}': must be 'local' or an http(s) URL"
    )


def validate_option(option: str, value: str) -> None:
    """
    Check that a value may be stored for a configurable option.

    Raises:
        ConfigError: On unknown options or an invalid target
    """
    if option not in CONFIGURABLE_OPTIONS:
        raise ConfigError(
            f"Unknown option '{option}': must be one of {', '.join(CONFIGURABLE_OPTIONS)}"
        )
    if option == "target":
        resolve_target(value, ServiceKind.QUERY)


def save_config_value(option: str, value: str) -> Path:
    """
    Persist one option to config.yaml, keeping the other keys.

    Returns:
        Path of the written file
    """
    validate_option(option, value)
    data = load_yaml_config(CONFIG_FILENAME)
    data[option] = value
    try:
        CliConfigSchema(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {CONFIG_FILENAME}:\n{e}") from e

    config_path = find_config_home() / CONFIG_FILENAME
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)

    get_cli_config.cache_clear()
    return config_path
