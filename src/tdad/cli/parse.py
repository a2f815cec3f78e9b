"""tdad parse command - show the tests declared in a test file."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from tdad.testing.definitions import extract_generated_code_from_file, parse_test_file


@click.command()
@click.argument("test_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--node-id", help="Node id to stamp on parsed features")
@click.option("--code", is_flag=True, help="Print the generated code below the header instead")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def parse_command(test_file: Path, node_id: str | None, code: bool, as_json: bool) -> None:
    """Parse TEST_FILE into features and tests."""
    if code:
        generated = extract_generated_code_from_file(test_file)
        if generated is None:
            raise click.ClickException(f"No generated code found in {test_file}")
        click.echo(generated)
        return

    parsed = parse_test_file(test_file, node_id)
    if as_json:
        click.echo(json.dumps([f.to_dict() for f in parsed.features], indent=2))
        return

    console = Console()
    if not parsed.features:
        console.print("[yellow]No tests found[/yellow]")
        return
    tree = Tree(f"[bold]{escape(test_file.name)}[/bold] ({parsed.test_count} tests)")
    for feature in parsed.features:
        branch = tree.add(f"[cyan]{escape(feature.description)}[/cyan]")
        for test in feature.tests:
            branch.add(escape(test.title))
    console.print(tree)
