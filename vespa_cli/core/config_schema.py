"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML file in the
CLI config home. Used by the config loader to validate files at load time.
Unknown keys or wrong types raise a clear error naming the file instead
of failing deep inside a command.

Each top-level class corresponds to one file:
    CliConfigSchema  → config.yaml
    LoggingSchema    → logging.yaml
"""

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_TARGET = "local"
DEFAULT_TIMEOUT_SECONDS = 10.0


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# config.yaml
# =============================================================================


class CliConfigSchema(_StrictBase):
    target: str = DEFAULT_TARGET
    application: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool = True


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "logs/cli.jsonl"
    max_bytes: int = 5242880
    backup_count: int = 3


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema = ConsoleHandlerSchema()
    file: FileHandlerSchema = FileHandlerSchema()


class LoggingSchema(_StrictBase):
    level: str = "WARNING"
    format: str = "console"
    handlers: HandlersSchema = HandlersSchema()
