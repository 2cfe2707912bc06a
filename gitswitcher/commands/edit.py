"""Open the active git configuration in an editor."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Mapping, Optional

import click

from gitswitcher.utils import GitSwitcherError, get_git_config_path, report_error


def editor_command(editor: str, path) -> list[str]:
    """Split an editor setting on whitespace and append the file to open."""
    parts = editor.split()
    if not parts:
        raise GitSwitcherError("EDITOR environment variable is empty")
    return [*parts, str(path)]


def run(home=None, environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Launch the editor on ~/.gitconfig; return its exit status, or None if absent."""
    env = os.environ if environ is None else environ
    git_config_path: Path = get_git_config_path(home)

    if not git_config_path.exists():
        click.echo(
            f"{click.style('Warning:', fg='yellow')} No active .gitconfig found at "
            f'"{git_config_path}" to edit.'
        )
        click.echo(
            click.style("Consider switching to or creating a profile first.", fg="yellow")
        )
        return None

    editor = env.get("EDITOR", "vim")
    command = editor_command(editor, git_config_path)

    click.echo(
        f"{click.style('Info:', fg='blue')} Opening \"{git_config_path}\" with {editor}..."
    )

    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        raise GitSwitcherError(f"Failed to run editor {editor}") from exc

    if completed.returncode != 0:
        click.echo(
            f"{click.style('Error:', fg='red')} Editor exited with non-zero status",
            err=True,
        )
    return completed.returncode


def execute(home=None) -> None:
    """Run the edit command, exiting with status 1 on failure."""
    try:
        run(home)
    except GitSwitcherError as exc:
        report_error(exc)
        raise SystemExit(1) from exc