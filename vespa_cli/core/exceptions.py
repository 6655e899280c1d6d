"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Each exception carries a human-readable message that the CLI prints
verbatim after an "Error: " prefix.
"""

from enum import Enum


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigError(ApplicationError):
    """Raised when configuration is missing, unreadable or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class ParseError(ApplicationError):
    """Raised when a document id does not match id:<namespace>:<type>::<id>."""

    def __init__(self, raw: str, reason: str = "invalid format") -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid document id '{raw}': {reason}", code="DOC_INVALID_ID")


class ResolutionReason(str, Enum):
    """Why a document operation could not be resolved from its inputs."""

    NO_OPERATION = "no_operation"
    NO_DOCUMENT_ID = "no_document_id"
    CONFLICTING_OPERATION = "conflicting_operation"
    UNREADABLE_FILE = "unreadable_file"
    INVALID_JSON = "invalid_json"


class ResolutionError(ApplicationError):
    """Raised when arguments and JSON payload do not determine one operation."""

    def __init__(self, reason: ResolutionReason, message: str) -> None:
        self.reason = reason
        super().__init__(message, code=f"DOC_{reason.name}")
