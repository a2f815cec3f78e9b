"""Config module exports."""

from tdad.config.loader import load_config
from tdad.config.models import (
    CoverageConfig,
    LoggingConfig,
    LogOutputConfig,
    RunnerConfig,
    TdadConfig,
)

__all__ = [
    "load_config",
    "TdadConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "RunnerConfig",
    "CoverageConfig",
]
