"""Test verification pipeline.

Parses generated test files, runs them through the external runner,
correlates the runner's JSON report back onto the parsed definitions and
attaches coverage to each result.
"""

from tdad.testing.correlate import correlate, failed_results, reduce_error
from tdad.testing.definitions import (
    ParsedDefinitions,
    extract_generated_code,
    has_valid_tests,
    parse_definitions,
    parse_test_file,
)
from tdad.testing.executor import ProcessExecutor, ProcessOutcome
from tdad.testing.models import (
    ApiRequest,
    CoverageData,
    Feature,
    Node,
    RunReport,
    Test,
    TestResult,
    TestTrace,
)
from tdad.testing.orchestrator import TestOrchestrator, resolve_dependencies
from tdad.testing.report import ExtractionFailure, ParsedReport, RunnerReport, extract_report
from tdad.testing.runner import TestRunner
from tdad.testing.test_ids import assign_test_ids, detect_test_type

__all__ = [
    # Models
    "ApiRequest",
    "CoverageData",
    "Feature",
    "Node",
    "RunReport",
    "Test",
    "TestResult",
    "TestTrace",
    # Definitions
    "ParsedDefinitions",
    "extract_generated_code",
    "has_valid_tests",
    "parse_definitions",
    "parse_test_file",
    # Execution
    "ProcessExecutor",
    "ProcessOutcome",
    "TestRunner",
    "TestOrchestrator",
    "resolve_dependencies",
    # Reports
    "ExtractionFailure",
    "ParsedReport",
    "RunnerReport",
    "correlate",
    "extract_report",
    "failed_results",
    "reduce_error",
    # Test ids
    "assign_test_ids",
    "detect_test_type",
]
