"""Command-line entry point."""

from __future__ import annotations

from typing import Optional, Sequence

import click

from gitswitcher.commands import create, delete, edit, listing, rename, root, switch


@click.group(
    name="git-switcher",
    invoke_without_command=True,
    help="A tool to easily switch between different git configurations",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        root.execute()


@cli.command(
    "create",
    short_help="Creates a new git configuration profile",
    help=(
        "Creates a new git configuration profile.\n\n"
        "You will be prompted to enter a name for the new profile. A new configuration "
        "file will be created in the ~/.config/gitconfigs directory."
    ),
)
def create_command() -> None:
    create.execute()


@cli.command(
    "delete",
    short_help="Deletes an existing git configuration profile",
    help=(
        "Deletes an existing git configuration profile.\n\n"
        "You will be prompted to select a profile to delete from the available profiles. "
        "The selected configuration file will be removed from the ~/.config/gitconfigs "
        "directory. If the deleted profile is the currently active one, ~/.gitconfig "
        "will also be removed."
    ),
)
def delete_command() -> None:
    delete.execute()


@cli.command(
    "edit",
    short_help="Opens the current ~/.gitconfig file in your default editor",
    help=(
        "Opens the currently active ~/.gitconfig file in your system's default editor "
        "(or $EDITOR environment variable if set).\n\n"
        "This allows you to directly modify the active git configuration."
    ),
)
def edit_command() -> None:
    edit.execute()


@cli.command(
    "list",
    short_help="Lists all available git configuration profiles",
    help=(
        "Lists all available git configuration profiles stored in ~/.config/gitconfigs.\n\n"
        "The currently active profile (if any) will be marked with an asterisk (*) and "
        "highlighted."
    ),
)
def list_command() -> None:
    listing.execute()


@cli.command(
    "rename",
    short_help="Renames an existing git configuration profile",
    help=(
        "Renames an existing git configuration profile.\n\n"
        "You will be prompted to select the profile to rename and then to enter the new "
        "name. The configuration file in ~/.config/gitconfigs will be renamed. If the "
        "renamed profile is the currently active one, the ~/.gitconfig symlink will be "
        "updated."
    ),
)
def rename_command() -> None:
    rename.execute()


@cli.command(
    "switch",
    short_help="Switches the active git configuration to the specified profile",
    help=(
        "Switches the active git configuration to the specified profile.\n\n"
        "The command takes exactly one argument: the name of the profile to switch to. "
        "This profile must exist in the ~/.config/gitconfigs directory. The ~/.gitconfig "
        "file will be updated to be a symlink to the selected profile."
    ),
)
@click.argument("profile_name")
def switch_command(profile_name: str) -> None:
    switch.execute(profile_name)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    try:
        result = cli.main(
            args=list(argv) if argv is not None else None,
            prog_name="git-switcher",
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())