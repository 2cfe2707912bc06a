# gitswitcher

Keep several git configurations side by side and switch between them quickly.

Each profile is a plain gitconfig file kept in `~/.config/gitconfigs` (the directory is
created when needed). The file that git reads, `~/.gitconfig`, becomes a symbolic link to
the profile that is active.

## Installation

```
pip install .
```

This installs the `git-switcher` command. It needs Python 3.10 or later and a file
system that supports symbolic links.

## Usage

Run the command with no arguments to pick a profile interactively:

```
git-switcher
```

The profiles are shown as a numbered list; the active one is preselected, so pressing
Enter keeps it. Before the list is shown:

- if `~/.gitconfig` is a regular file whose contents match no file in
  `~/.config/gitconfigs`, it is saved there as the profile `old-configs` (as a hard link,
  or a copy where a link cannot be made). If `old-configs` already exists, nothing is
  saved and a note says so;
- if there is no `~/.gitconfig` at all, a minimal one (`[user]` with `name = username`)
  is written.

### Subcommands

| Command                         | What it does                                                                  |
|---------------------------------|-------------------------------------------------------------------------------|
| `git-switcher create`           | Prompts for a name and creates a new profile with a `[user]` section.         |
| `git-switcher list`             | Lists all profiles in name order and marks the active one with `*`.           |
| `git-switcher switch <profile>` | Replaces `~/.gitconfig` with a symlink to the named profile.                  |
| `git-switcher rename`           | Renames a profile and updates the symlink if that profile is active.          |
| `git-switcher delete`           | Deletes a profile after confirmation; also removes `~/.gitconfig` if active.  |
| `git-switcher edit`             | Opens `~/.gitconfig` in `$EDITOR` (or `vim` if it is unset).                  |

`git-switcher --help` and `git-switcher <command> --help` describe each command.

Files whose names start with a dot are not treated as profiles. A new profile starts
out as:

```
[user]
	name = <profile name>
	email = your_email@example.com
```

Edit it to set the user name and e-mail you want for that profile. Creating a profile
whose name is already taken reports an error and leaves the existing file alone.

`switch` fails with exit status 1 when the profile does not exist, and lists the
entries that are available. `edit` splits `$EDITOR` on whitespace, so a value such as
`code --wait` works, but quoting inside it is not understood.

### Example

```
git-switcher create          # enter "work"
git-switcher create          # enter "personal"
git-switcher switch work
git-switcher list
```

The active profile is found by following the `~/.gitconfig` symlink. If `~/.gitconfig`
is a regular file, its contents are compared with each profile (by MD5 digest) to find
a match.

## Use from Python

`gitswitcher.cli.main(argv)` runs the command line and returns the exit status. Each
command lives in `gitswitcher.commands` (`create`, `delete`, `edit`, `listing`,
`rename`, `root`, `switch`) with a `run(home=None)` function that takes an alternative
home directory and raises `gitswitcher.utils.GitSwitcherError` on failure; for example
`switch.run("work", home="/tmp/home")`. Helpers such as `list_profiles`,
`detect_current_profile` and `hash_file` are in `gitswitcher.utils`.

## Running the tests

```
pip install ".[test]"
pytest
```