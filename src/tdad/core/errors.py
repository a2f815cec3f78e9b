"""TDAD error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test execution
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Test execution (7xxx)
    PROCESS_SPAWN_FAILED = 7001
    PROCESS_NONZERO_EXIT = 7002
    EXECUTOR_BUSY = 7003


@dataclass(frozen=True, slots=True)
class TdadError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TdadError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ProcessError(TdadError):
    """Process-level failures of the external runner.

    These are the only errors ProcessExecutor lets escape. A failing test
    suite is not one of them.
    """

    @classmethod
    def spawn_failed(cls, command: str, reason: str) -> "ProcessError":
        return cls(
            code=ErrorCode.PROCESS_SPAWN_FAILED,
            message=f"Could not start process: {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def nonzero_exit(cls, command: str, exit_code: int | None, stderr: str) -> "ProcessError":
        return cls(
            code=ErrorCode.PROCESS_NONZERO_EXIT,
            message=f"Process exited with code {exit_code}\n{stderr}",
            details={"command": command, "exit_code": exit_code},
        )

    @classmethod
    def busy(cls) -> "ProcessError":
        return cls(
            code=ErrorCode.EXECUTOR_BUSY,
            message="A process is already running on this executor",
            retryable=True,
        )
