"""Point ~/.gitconfig at a named profile."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import click

from gitswitcher.utils import (
    GitSwitcherError,
    create_symlink,
    get_config_dir,
    get_git_config_path,
    report_error,
)


class ProfileNotFoundError(GitSwitcherError):
    """Raised when the requested profile does not exist."""

    def __init__(self, profile_name: str, path: Path, available: Sequence[str]):
        super().__init__(f'Profile "{profile_name}" does not exist at "{path}"')
        self.profile_name = profile_name
        self.path = path
        self.available = list(available)


def _visible_entries(config_dir: Path) -> list[str]:
    try:
        return sorted(
            entry.name
            for entry in config_dir.iterdir()
            if not entry.name.startswith(".")
        )
    except OSError:
        return []


def run(profile_name: str, home=None) -> Path:
    """Replace ~/.gitconfig with a symlink to the profile; return the profile path."""
    config_dir = get_config_dir(home)
    git_config_path = get_git_config_path(home)
    target = config_dir / profile_name

    if not target.exists():
        raise ProfileNotFoundError(profile_name, target, _visible_entries(config_dir))

    if git_config_path.exists() or git_config_path.is_symlink():
        try:
            git_config_path.unlink()
        except OSError as exc:
            raise GitSwitcherError("Failed to remove existing .gitconfig") from exc

    try:
        create_symlink(target, git_config_path)
    except OSError as exc:
        raise GitSwitcherError("Failed to create symlink") from exc

    click.echo(
        f"{click.style('Success:', fg='blue')} Switched to profile \"{profile_name}\". "
        f'~/.gitconfig now points to "{target}".'
    )
    return target


def execute(profile_name: str, home=None) -> None:
    """Run the switch command, exiting with status 1 on failure."""
    try:
        run(profile_name, home)
    except ProfileNotFoundError as exc:
        report_error(exc)
        click.echo("Available profiles:")
        for name in exc.available:
            click.echo(f"  - {name}")
        raise SystemExit(1) from exc
    except GitSwitcherError as exc:
        report_error(exc)
        raise SystemExit(1) from exc