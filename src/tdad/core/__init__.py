"""Core module exports."""

from tdad.core.errors import (
    ConfigError,
    ErrorCode,
    ProcessError,
    TdadError,
)
from tdad.core.logging import (
    clear_run_id,
    configure_logging,
    get_log_file_path,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "TdadError",
    "ConfigError",
    "ErrorCode",
    "ProcessError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_log_file_path",
    "get_run_id",
    "set_run_id",
]
