"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TDAD__SECTION__KEY)
3. Workspace YAML (.tdad/config.yaml)
4. Per-user YAML (~/.config/tdad/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TDAD__<SECTION>__<KEY>=<VALUE>

Examples:
    TDAD__LOGGING__LEVEL=DEBUG
    TDAD__RUNNER__TIMEOUT_MS=120000
    TDAD__COVERAGE__DIRECTORY=.tdad/coverage
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TDAD__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every parsed test and decoded URL.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunnerConfig(BaseModel):
    """External test runner invocation.

    Env vars:
        TDAD__RUNNER__COMMAND: Runner binary and subcommand
        TDAD__RUNNER__TIMEOUT_MS: Per-run timeout in milliseconds
        TDAD__RUNNER__ASSIGN_TEST_IDS: Tag untagged tests before each run
    """

    command: str = Field(
        default="npx playwright test",
        description="Runner binary and subcommand. The relative test file path is appended.",
    )
    config_path: str = Field(
        default=".tdad/playwright.config.js",
        description="Runner config file, relative to the workspace root.",
    )
    reporters: str = Field(
        default="list,json",
        description="Reporter selection. Must include one JSON reporter writing to stdout.",
    )
    timeout_ms: int = Field(
        default=60000,
        description="Timeout before the runner is terminated. "
        "RISK: Too low kills slow browser suites; too high stalls repair loops.",
    )
    assign_test_ids: bool = Field(
        default=True,
        description="Prefix untagged tests with [UI-NNN]/[API-NNN] before running.",
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Extra environment variables for the runner process.",
    )

    @field_validator("timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"timeout_ms must be positive, got {v}")
        return v


class CoverageConfig(BaseModel):
    """Coverage attribution configuration.

    Env vars:
        TDAD__COVERAGE__DIRECTORY: Coverage directory relative to the workspace
        TDAD__COVERAGE__CLEAR_BEFORE_RUN: Delete stale shard files before a run
    """

    directory: str = Field(
        default=".tdad/coverage",
        description="Directory the runner's workers write coverage shards to.",
    )
    clear_before_run: bool = Field(
        default=True,
        description="Remove stale coverage.json and worker shards before each run. "
        "RISK: Disabling attributes files executed by earlier runs.",
    )


class TdadConfig(BaseModel):
    """Root configuration for TDAD.

    All settings can be configured via:
    1. Environment variables: TDAD__SECTION__KEY
    2. YAML config file (.tdad/config.yaml)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
