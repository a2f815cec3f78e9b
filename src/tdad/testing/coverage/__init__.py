"""Coverage attribution for test runs.

This package provides:
- Discovery of three coverage file generations (worker shards, single-file
  legacy dump, statement summary table)
- A single-pass shard merge that keeps only executed user paths and traces
- URL-to-source decoding for bundler chunk names
- Backend file inference from captured API calls

Usage:
    from tdad.testing.coverage import build_coverage_data

    data = build_coverage_data(workspace / ".tdad" / "coverage")
    data.source_files            # executed user files
    data.inferred_backend_files  # route/controller candidates
"""

from tdad.testing.coverage.backend import infer_backend_files
from tdad.testing.coverage.decode import (
    decode_source_path,
    is_user_source_file,
    paths_from_source_text,
)
from tdad.testing.coverage.merge import (
    CoverageShardMerger,
    clear_coverage,
    detect_source,
    has_coverage,
)
from tdad.testing.coverage.models import CoverageReadError, MergedCoverage
from tdad.testing.coverage.report import (
    build_coverage_data,
    format_coverage_files,
    get_detailed_coverage,
)
from tdad.testing.coverage.sources import (
    SOURCE_BY_FORMAT,
    SOURCE_REGISTRY,
    CoverageSource,
    LegacyCoverageSource,
    SummaryCoverageSource,
    WorkerShardSource,
)

__all__ = [
    # Models
    "CoverageReadError",
    "MergedCoverage",
    # Sources
    "CoverageSource",
    "LegacyCoverageSource",
    "SOURCE_BY_FORMAT",
    "SOURCE_REGISTRY",
    "SummaryCoverageSource",
    "WorkerShardSource",
    # Merge
    "CoverageShardMerger",
    "clear_coverage",
    "detect_source",
    "has_coverage",
    # Decoding
    "decode_source_path",
    "infer_backend_files",
    "is_user_source_file",
    "paths_from_source_text",
    # Report
    "build_coverage_data",
    "format_coverage_files",
    "get_detailed_coverage",
]
