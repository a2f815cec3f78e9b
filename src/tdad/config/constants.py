"""Configuration constants.

Values here are protocol details shared with the external runner and the
on-disk layout of a workspace. They are not user-configurable.

For configurable values, see models.py (RunnerConfig, CoverageConfig).
"""

# =============================================================================
# Workspace Layout
# =============================================================================

TDAD_DIR = ".tdad"
"""Per-workspace state directory."""

CONFIG_FILE = f"{TDAD_DIR}/config.yaml"
"""Workspace config file, relative to the workspace root."""

WORKFLOWS_DIR = f"{TDAD_DIR}/workflows"
"""Root of generated test files, one folder per workflow."""

DEBUG_DIR = f"{TDAD_DIR}/debug"
"""Root of per-node screenshots and trace files."""

TEST_FILE_SUFFIX = ".test.js"
FEATURE_FILE_SUFFIX = ".feature"

# =============================================================================
# Process Lifecycle
# =============================================================================

KILL_GRACE_MS = 2000
"""Time between the graceful termination signal and the forced kill."""

# =============================================================================
# Coverage Files
# =============================================================================
# Three generations, checked most specific first.

SHARD_PREFIX = "coverage-worker-"
"""Per-worker shard files: coverage-worker-<n>.json."""

LEGACY_COVERAGE_FILE = "coverage.json"
"""Single-process coverage dump."""

SUMMARY_COVERAGE_FILE = "coverage-summary.json"
"""Statement-percentage table keyed by file path."""

SUMMARY_TOTAL_KEY = "total"
"""Reserved aggregate entry in the summary table."""
