"""TDAD CLI - tdad command."""

import click

from tdad.cli.coverage import coverage_command
from tdad.cli.parse import parse_command
from tdad.cli.run import run_command
from tdad.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="tdad")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """TDAD - run generated tests and attribute their results and coverage."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(run_command, name="run")
cli.add_command(parse_command, name="parse")
cli.add_command(coverage_command, name="coverage")


if __name__ == "__main__":
    cli()
