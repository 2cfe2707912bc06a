"""Create a new profile file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from gitswitcher.utils import GitSwitcherError, get_config_dir, prompt_text, report_error


def validate_name(name: str) -> Optional[str]:
    """Return an error message for an unusable profile name, else None."""
    if not name:
        return "Name cannot be empty"
    return None


def profile_content(name: str) -> str:
    """Return the initial contents of a new profile."""
    return f"[user]\n\tname = {name}\n\temail = your_email@example.com"


def run(home=None) -> Optional[Path]:
    """Prompt for a name and write the profile; return its path, or None if it exists."""
    config_dir = get_config_dir(home)
    try:
        name = prompt_text("Profile name:", validate_name)
    except GitSwitcherError as exc:
        raise GitSwitcherError("Failed to get profile name") from exc

    profile_path = config_dir / name
    if profile_path.exists():
        click.echo(
            f"{click.style('Error:', fg='red')} Profile \"{name}\" already exists "
            f'at "{profile_path}"'
        )
        return None

    try:
        profile_path.write_text(profile_content(name))
    except OSError as exc:
        raise GitSwitcherError("Failed to write profile file") from exc

    click.echo(
        f"{click.style('Success:', fg='green')} Profile \"{name}\" created "
        f'successfully at "{profile_path}"'
    )
    click.echo(
        click.style(
            "Please edit the file to set your desired git user name and email.",
            fg="yellow",
        )
    )
    return profile_path


def execute(home=None) -> None:
    """Run the create command, exiting with status 1 on failure."""
    try:
        run(home)
    except GitSwitcherError as exc:
        report_error(exc)
        raise SystemExit(1) from exc