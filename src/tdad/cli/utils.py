"""CLI utilities."""

from pathlib import Path

import click

from tdad.config.constants import TDAD_DIR


def find_workspace_root(start_path: Path | None = None) -> Path:
    """Find the workspace root: the nearest ancestor holding a ``.tdad`` directory.

    Raises:
        click.ClickException: If no ancestor has one
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()
    if current.is_file():
        current = current.parent

    while current != current.parent:
        if (current / TDAD_DIR).is_dir():
            return current
        current = current.parent

    if (current / TDAD_DIR).is_dir():
        return current

    raise click.ClickException(
        f"Not inside a TDAD workspace: {start_path}\n"
        "Pass --workspace or run from a directory containing .tdad/."
    )
