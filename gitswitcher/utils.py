"""Shared helpers: profile locations, hashing, active-profile detection and prompts."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Union

import click

PathLike = Union[str, "os.PathLike[str]"]


class GitSwitcherError(Exception):
    """Raised when a profile operation cannot be completed."""


def _home(home: Optional[PathLike]) -> Path:
    if home is not None:
        return Path(home)
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise GitSwitcherError("Could not find home directory") from exc


def get_config_dir(home: Optional[PathLike] = None) -> Path:
    """Return the profile directory, creating it if needed."""
    config_dir = _home(home) / ".config" / "gitconfigs"
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise GitSwitcherError("Failed to create config directory") from exc
    return config_dir


def get_git_config_path(home: Optional[PathLike] = None) -> Path:
    """Return the path of the user's global git configuration."""
    return _home(home) / ".gitconfig"


def hash_file(path: PathLike) -> str:
    """Return the hexadecimal MD5 digest of a file's contents."""
    try:
        content = Path(path).read_bytes()
    except OSError as exc:
        raise GitSwitcherError(f'Failed to read file "{path}"') from exc
    return hashlib.md5(content).hexdigest()


def create_symlink(original: PathLike, link: PathLike) -> None:
    """Create ``link`` as a symbolic link pointing at ``original``."""
    os.symlink(original, link)


def list_profiles(config_dir: PathLike) -> list[str]:
    """Return the sorted names of the visible profile files in ``config_dir``."""
    try:
        entries = list(Path(config_dir).iterdir())
    except OSError as exc:
        raise GitSwitcherError("Failed to read config directory") from exc
    return sorted(
        entry.name
        for entry in entries
        if entry.is_file() and not entry.name.startswith(".")
    )


def detect_current_profile(
    config_dir: PathLike, git_config_path: PathLike, profiles: Iterable[str]
) -> Optional[str]:
    """Name the active profile.

    A symlinked git config yields the name of its target; a regular file is
    matched against the profiles by content hash.
    """
    git_config_path = Path(git_config_path)
    if not git_config_path.exists():
        return None
    if git_config_path.is_symlink():
        name = Path(os.readlink(git_config_path)).name
        return name or None
    try:
        digest = hash_file(git_config_path)
    except GitSwitcherError:
        return None
    for profile in profiles:
        try:
            if hash_file(Path(config_dir) / profile) == digest:
                return profile
        except GitSwitcherError:
            continue
    return None


def prompt_text(
    message: str, validator: Optional[Callable[[str], Optional[str]]] = None
) -> str:
    """Ask for a line of text until ``validator`` accepts it.

    The validator returns an error message, or None when the input is valid.
    """
    while True:
        try:
            value = click.prompt(message, default="", show_default=False)
        except click.Abort as exc:
            raise GitSwitcherError("prompt cancelled") from exc
        problem = validator(value) if validator is not None else None
        if problem is None:
            return value
        click.echo(click.style(problem, fg="red"), err=True)


def prompt_select(message: str, options: Sequence[str], start_index: int = 0) -> str:
    """Let the user pick one of ``options`` by number."""
    choices = list(options)
    if not choices:
        raise GitSwitcherError("No options to select from")
    start_index = min(max(start_index, 0), len(choices) - 1)
    click.echo(message)
    for number, option in enumerate(choices, start=1):
        marker = ">" if number == start_index + 1 else " "
        click.echo(f"{marker} {number}) {option}")
    try:
        number = click.prompt(
            "Choice", type=click.IntRange(1, len(choices)), default=start_index + 1
        )
    except click.Abort as exc:
        raise GitSwitcherError("prompt cancelled") from exc
    return choices[number - 1]


def prompt_confirm(message: str, default: bool = False) -> bool:
    """Ask a yes/no question."""
    try:
        return click.confirm(message, default=default)
    except click.Abort as exc:
        raise GitSwitcherError("prompt cancelled") from exc


def report_error(error: object) -> None:
    """Print an error message to standard error."""
    click.echo(f"{click.style('Error:', fg='red')} {error}", err=True)