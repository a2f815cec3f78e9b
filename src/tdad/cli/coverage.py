"""tdad coverage command - summarize a coverage directory."""

import json
from pathlib import Path

import click
from rich.console import Console

from tdad.testing.coverage import (
    build_coverage_data,
    detect_source,
    format_coverage_files,
    get_detailed_coverage,
)


@click.command()
@click.argument(
    "coverage_dir",
    default=".tdad/coverage",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def coverage_command(coverage_dir: Path, as_json: bool) -> None:
    """Merge the coverage files in COVERAGE_DIR and list executed sources."""
    source = detect_source(coverage_dir)
    data = build_coverage_data(coverage_dir)

    if as_json:
        payload = data.to_dict()
        payload["format"] = source.format_id if source else None
        payload["statementPct"] = get_detailed_coverage(coverage_dir, data.source_files)
        click.echo(json.dumps(payload, indent=2))
        return

    console = Console()
    if source is None:
        console.print("[yellow]No coverage files found[/yellow]")
        return
    console.print(f"[bold]Format:[/bold] {source.format_id}")
    console.print(format_coverage_files(data.source_files, Path.cwd()), markup=False)
    if data.inferred_backend_files:
        console.print("[bold]Inferred backend files:[/bold]")
        for path in data.inferred_backend_files:
            console.print(f"  {path}")
