"""Coverage directory discovery, merge and cleanup."""

from __future__ import annotations

from pathlib import Path

import structlog

from tdad.config.constants import LEGACY_COVERAGE_FILE
from tdad.testing.coverage.models import MergedCoverage
from tdad.testing.coverage.sources import SOURCE_REGISTRY, CoverageSource, shard_files

log = structlog.get_logger(__name__)


def detect_source(coverage_dir: Path) -> CoverageSource | None:
    """First registered source whose files exist in ``coverage_dir``."""
    for source in SOURCE_REGISTRY:
        if source.detect(coverage_dir):
            return source
    return None


def has_coverage(coverage_dir: Path) -> bool:
    return detect_source(coverage_dir) is not None


def clear_coverage(coverage_dir: Path) -> int:
    """Delete ``coverage.json`` and every worker shard. Returns files removed.

    The summary table is left alone; it is written by a different tool.
    """
    targets = shard_files(coverage_dir)
    legacy = coverage_dir / LEGACY_COVERAGE_FILE
    if legacy.is_file():
        targets.append(legacy)

    removed = 0
    for path in targets:
        try:
            path.unlink()
            removed += 1
        except FileNotFoundError:
            continue
        except OSError as e:
            log.warning("coverage.clear_failed", file=path.name, error=str(e))
    if removed:
        log.info("coverage.cleared", files=removed)
    return removed


class CoverageShardMerger:
    """Reads a coverage directory into one ``MergedCoverage``.

    Example:
        merged = CoverageShardMerger(workspace / ".tdad/coverage").merge_and_extract()
        merged.source_files   # ["frontend/app/page.tsx", ...]
        merged.test_traces    # {"[UI-001] signs in": TestTrace(...)}
    """

    def __init__(self, coverage_dir: Path) -> None:
        self.coverage_dir = coverage_dir

    def merge_and_extract(self) -> MergedCoverage:
        source = detect_source(self.coverage_dir)
        if source is None:
            log.debug("coverage.none_found", dir=str(self.coverage_dir))
            return MergedCoverage()
        log.debug("coverage.source_detected", format=source.format_id)
        return source.read(self.coverage_dir)
