"""Interactive default command: back up an unmanaged config and pick a profile."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Optional

import click

from gitswitcher.commands import switch
from gitswitcher.utils import (
    GitSwitcherError,
    detect_current_profile,
    get_config_dir,
    get_git_config_path,
    hash_file,
    list_profiles,
    prompt_select,
    report_error,
)

DEFAULT_GIT_CONFIG = "[user]\n\tname = username"
BACKUP_NAME = "old-configs"


def _matches_any_entry(config_dir: Path, digest: str) -> bool:
    try:
        entries = list(config_dir.iterdir())
    except OSError:
        return False
    for entry in entries:
        try:
            if hash_file(entry) == digest:
                return True
        except GitSwitcherError:
            continue
    return False


def backup_unmanaged_config(config_dir, git_config_path) -> Optional[Path]:
    """Keep a regular ~/.gitconfig that matches no profile as the "old-configs" profile.

    Returns the backup path when one was made, else None.
    """
    config_dir = Path(config_dir)
    git_config_path = Path(git_config_path)
    if not git_config_path.exists() or git_config_path.is_symlink():
        return None

    digest = hash_file(git_config_path)
    if _matches_any_entry(config_dir, digest):
        return None

    backup_path = config_dir / BACKUP_NAME
    info = click.style("Info:", fg="blue")
    if backup_path.exists():
        click.echo(
            f'{info} "{backup_path}" already exists. Current .gitconfig not linked as old-configs.'
        )
        return None

    try:
        os.link(git_config_path, backup_path)
    except OSError:
        try:
            shutil.copy(git_config_path, backup_path)
        except OSError as exc:
            raise GitSwitcherError("Failed to backup current .gitconfig") from exc
    click.echo(f'{info} Current .gitconfig backed up to "{backup_path}"')
    return backup_path


def run(home=None) -> Optional[str]:
    """Prepare the config, prompt for a profile and switch to it; return the choice."""
    config_dir = get_config_dir(home)
    git_config_path = get_git_config_path(home)

    if git_config_path.exists():
        backup_unmanaged_config(config_dir, git_config_path)
    else:
        try:
            git_config_path.write_text(DEFAULT_GIT_CONFIG)
        except OSError as exc:
            raise GitSwitcherError("Failed to create default .gitconfig") from exc

    profiles = list_profiles(config_dir)
    if not profiles:
        click.echo(f'No git configuration profiles found in "{config_dir}".')
        click.echo("You can create one using 'git-switcher create'.")
        return None

    current = detect_current_profile(config_dir, git_config_path, profiles)
    if current not in profiles:
        current = None
    start_index = profiles.index(current) if current is not None else 0

    try:
        choice = prompt_select(
            f"Select Git Config (Current: {current or 'unknown'})", profiles, start_index
        )
    except GitSwitcherError:
        click.echo("Operation cancelled.")
        return None

    switch.execute(choice, home)
    return choice


def execute(home=None) -> None:
    """Run the interactive command, exiting with status 1 on failure."""
    try:
        run(home)
    except GitSwitcherError as exc:
        report_error(exc)
        raise SystemExit(1) from exc