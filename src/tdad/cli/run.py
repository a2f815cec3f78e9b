"""tdad run command - run one test file and show correlated results."""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tdad.cli.utils import find_workspace_root
from tdad.config import load_config
from tdad.core.errors import ConfigError
from tdad.core.logging import configure_logging, get_log_file_path
from tdad.testing.models import RunReport
from tdad.testing.runner import TestRunner


def _render(report: RunReport, console: Console) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Test")
    table.add_column("Result")
    table.add_column("Error", overflow="fold")
    for result in report.results:
        status = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
        table.add_row(escape(result.test.title), status, escape(result.error or ""))
    console.print(table)

    summary = f"{report.passed_count}/{len(report.results)} passed in {report.duration_ms} ms"
    if report.timed_out:
        summary += " [yellow](timed out)[/yellow]"
    console.print(summary)

    coverage = next((r.coverage_data for r in report.results if r.coverage_data), None)
    if coverage is not None:
        console.print(f"Source files executed: {len(coverage.source_files)}")
        for path in coverage.inferred_backend_files:
            console.print(f"  [cyan]backend?[/cyan] {path}")


@click.command()
@click.argument("test_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--workspace",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Workspace root (default: nearest ancestor with .tdad/)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config YAML to use instead of .tdad/config.yaml",
)
@click.option("--timeout", "timeout_ms", type=int, help="Timeout in milliseconds")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--stream", is_flag=True, help="Echo runner output while it runs")
@click.pass_context
def run_command(
    ctx: click.Context,
    test_file: Path,
    workspace: Path | None,
    config_file: Path | None,
    timeout_ms: int | None,
    as_json: bool,
    stream: bool,
) -> None:
    """Run TEST_FILE through the configured runner.

    Exits non-zero when any test fails.
    """
    workspace_root = workspace.resolve() if workspace else find_workspace_root(test_file)
    try:
        config = load_config(workspace_root, config_file=config_file)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    verbose = bool((ctx.obj or {}).get("verbose"))
    configure_logging(config=config.logging, level="DEBUG" if verbose else None)

    def echo_output(_stream: str, text: str) -> None:
        click.echo(text, nl=False, err=True)

    runner = TestRunner(config, on_output=echo_output if stream else None)
    report = asyncio.run(
        runner.run_test_file(test_file.resolve(), workspace_root, timeout_ms=timeout_ms)
    )

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        console = Console()
        _render(report, console)
        log_file = get_log_file_path()
        if log_file is not None and not report.all_passed:
            console.print(f"Detailed log: {escape(str(log_file))}", soft_wrap=True)

    if not report.all_passed:
        raise SystemExit(1)
