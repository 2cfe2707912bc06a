"""Delete a profile, removing ~/.gitconfig as well when it was active."""

from __future__ import annotations

from typing import Optional

import click

from gitswitcher.utils import (
    GitSwitcherError,
    detect_current_profile,
    get_config_dir,
    get_git_config_path,
    list_profiles,
    prompt_confirm,
    prompt_select,
    report_error,
)


def run(home=None) -> Optional[str]:
    """Prompt for a profile and delete it; return the deleted name, or None."""
    config_dir = get_config_dir(home)
    git_config_path = get_git_config_path(home)

    profiles = list_profiles(config_dir)
    if not profiles:
        click.echo(f'No git configuration profiles found to delete in "{config_dir}".')
        return None

    current = detect_current_profile(config_dir, git_config_path, profiles)
    if current not in profiles:
        current = None
    start_index = profiles.index(current) if current is not None else 0

    try:
        selection = prompt_select(
            f"Select Git Config profile to delete (Current: {current or 'none'})",
            profiles,
            start_index,
        )
    except GitSwitcherError as exc:
        raise GitSwitcherError("Prompt failed") from exc

    try:
        confirmed = prompt_confirm(
            f'Are you sure you want to delete profile "{selection}"?', default=False
        )
    except GitSwitcherError as exc:
        raise GitSwitcherError("Confirmation failed") from exc

    if not confirmed:
        click.echo(f"{click.style('Info:', fg='blue')} Profile \"{selection}\" not deleted.")
        return None

    try:
        (config_dir / selection).unlink()
    except OSError as exc:
        raise GitSwitcherError("Failed to delete profile file") from exc

    success = click.style("Success:", fg="green")
    if selection == current:
        if git_config_path.exists() or git_config_path.is_symlink():
            try:
                git_config_path.unlink()
            except OSError as exc:
                raise GitSwitcherError(
                    "Failed to remove current .gitconfig symlink"
                ) from exc
        click.echo(
            f'{success} Profile "{selection}" deleted. Current .gitconfig was also removed.'
        )
    else:
        click.echo(f'{success} Profile "{selection}" deleted.')
    return selection


def execute(home=None) -> None:
    """Run the delete command, exiting with status 1 on failure."""
    try:
        run(home)
    except GitSwitcherError as exc:
        report_error(exc)
        raise SystemExit(1) from exc