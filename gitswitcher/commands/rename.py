"""Rename a profile, keeping the ~/.gitconfig symlink pointed at it when active."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

import click

from gitswitcher.utils import (
    GitSwitcherError,
    create_symlink,
    get_config_dir,
    get_git_config_path,
    list_profiles,
    prompt_select,
    prompt_text,
    report_error,
)


def validate_new_name(name: str, old_name: str, profiles: Sequence[str]) -> Optional[str]:
    """Return an error message for an unusable new name, else None."""
    if not name:
        return "Name cannot be empty"
    if name in profiles and name != old_name:
        return f'Profile "{name}" already exists'
    return None


def _relink_if_active(git_config_path: Path, old_path: Path, new_path: Path, new_name: str) -> None:
    if not (git_config_path.exists() or git_config_path.is_symlink()):
        return
    if not git_config_path.is_symlink():
        return
    if Path(os.readlink(git_config_path)) != old_path:
        return
    try:
        git_config_path.unlink()
    except OSError as exc:
        raise GitSwitcherError("Failed to remove old symlink") from exc
    try:
        create_symlink(new_path, git_config_path)
    except OSError as exc:
        raise GitSwitcherError("Failed to create new symlink") from exc
    click.echo(
        f"{click.style('Info:', fg='blue')} Active profile symlink updated to \"{new_name}\"."
    )


def run(home=None) -> Optional[Path]:
    """Prompt for a profile and a new name and rename it; return the new path, or None."""
    config_dir = get_config_dir(home)
    git_config_path = get_git_config_path(home)

    profiles = list_profiles(config_dir)
    if not profiles:
        click.echo(f'No git configuration profiles found to rename in "{config_dir}".')
        return None

    try:
        old_name = prompt_select("Select profile to rename", profiles)
    except GitSwitcherError as exc:
        raise GitSwitcherError("Prompt failed") from exc

    try:
        new_name = prompt_text(
            f'Enter new name for profile "{old_name}"',
            lambda value: validate_new_name(value, old_name, profiles),
        )
    except GitSwitcherError as exc:
        raise GitSwitcherError("Prompt failed") from exc

    if old_name == new_name:
        click.echo(
            click.style("New name is the same as the old name. No changes made.", fg="yellow")
        )
        return None

    old_path = config_dir / old_name
    new_path = config_dir / new_name

    try:
        old_path.rename(new_path)
    except OSError as exc:
        raise GitSwitcherError("Failed to rename profile") from exc
    click.echo(
        f"{click.style('Success:', fg='green')} Profile \"{old_name}\" renamed to \"{new_name}\"."
    )

    _relink_if_active(git_config_path, old_path, new_path, new_name)
    return new_path


def execute(home=None) -> None:
    """Run the rename command, exiting with status 1 on failure."""
    try:
        run(home)
    except GitSwitcherError as exc:
        report_error(exc)
        raise SystemExit(1) from exc