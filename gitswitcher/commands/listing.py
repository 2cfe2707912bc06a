"""List the available profiles and mark the active one."""

from __future__ import annotations

from typing import Optional

import click

from gitswitcher.utils import (
    GitSwitcherError,
    detect_current_profile,
    get_config_dir,
    get_git_config_path,
    list_profiles,
    report_error,
)


def run(home=None) -> Optional[str]:
    """Print the profiles; return the name detected as active, if any."""
    config_dir = get_config_dir(home)
    git_config_path = get_git_config_path(home)

    profiles = list_profiles(config_dir)
    if not profiles:
        click.echo(f'No git configuration profiles found in "{config_dir}".')
        click.echo("You can create your first profile using 'git-switcher create'.")
        return None

    current = detect_current_profile(config_dir, git_config_path, profiles)

    click.echo(f'Available git configuration profiles in "{config_dir}":\n')
    for profile in profiles:
        if profile == current:
            click.echo(
                f"{click.style('*', fg='green')} {click.style(profile, fg='green')} (current)"
            )
        else:
            click.echo(f"  {profile}")

    if current is None:
        click.echo(
            "\n"
            + click.style(
                "No active profile detected or current .gitconfig is not managed "
                "by git-switcher.",
                fg="yellow",
            )
        )
        click.echo("Use 'git-switcher switch <profile>' to activate a profile.")
    return current


def execute(home=None) -> None:
    """Run the list command, exiting with status 1 on failure."""
    try:
        run(home)
    except GitSwitcherError as exc:
        report_error(exc)
        raise SystemExit(1) from exc