import io
import os
from pathlib import Path

import pytest

from gitswitcher.commands import rename, switch
from gitswitcher.utils import GitSwitcherError, get_config_dir, get_git_config_path


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def _make_profiles(home, **profiles):
    config_dir = get_config_dir(home)
    for name, content in profiles.items():
        (config_dir / name).write_text(content)
    return config_dir


def test_validate_empty_name():
    assert rename.validate_new_name("", "a", ["a", "b"]) == "Name cannot be empty"


def test_validate_existing_name():
    assert rename.validate_new_name("b", "a", ["a", "b"]) == 'Profile "b" already exists'


def test_validate_accepts_same_and_fresh_names():
    assert rename.validate_new_name("a", "a", ["a", "b"]) is None
    assert rename.validate_new_name("c", "a", ["a", "b"]) is None


def test_rename_moves_file(tmp_path, monkeypatch):
    config_dir = _make_profiles(tmp_path, a="alpha", b="beta")
    _feed(monkeypatch, "1\nc\n")
    result = rename.run(tmp_path)
    assert result == config_dir / "c"
    assert not (config_dir / "a").exists()
    assert (config_dir / "c").read_text() == "alpha"


def test_rename_active_profile_updates_symlink(tmp_path, monkeypatch):
    config_dir = _make_profiles(tmp_path, a="alpha", b="beta")
    switch.run("a", tmp_path)
    _feed(monkeypatch, "1\nc\n")
    rename.run(tmp_path)
    git_config = get_git_config_path(tmp_path)
    assert git_config.is_symlink()
    assert Path(os.readlink(git_config)) == config_dir / "c"
    assert git_config.read_text() == "alpha"


def test_rename_inactive_profile_keeps_symlink(tmp_path, monkeypatch):
    config_dir = _make_profiles(tmp_path, a="alpha", b="beta")
    switch.run("b", tmp_path)
    _feed(monkeypatch, "1\nc\n")
    rename.run(tmp_path)
    git_config = get_git_config_path(tmp_path)
    assert Path(os.readlink(git_config)) == config_dir / "b"
    assert git_config.read_text() == "beta"


def test_rename_same_name_changes_nothing(tmp_path, monkeypatch, capsys):
    config_dir = _make_profiles(tmp_path, a="alpha")
    _feed(monkeypatch, "1\na\n")
    assert rename.run(tmp_path) is None
    assert (config_dir / "a").read_text() == "alpha"
    assert "No changes made" in capsys.readouterr().out


def test_rename_reprompts_for_existing_name(tmp_path, monkeypatch):
    config_dir = _make_profiles(tmp_path, a="alpha", b="beta")
    _feed(monkeypatch, "1\nb\n\nc\n")
    assert rename.run(tmp_path) == config_dir / "c"
    assert (config_dir / "b").read_text() == "beta"
    assert (config_dir / "c").read_text() == "alpha"


def test_rename_without_profiles(tmp_path, capsys):
    assert rename.run(tmp_path) is None
    assert "No git configuration profiles found to rename" in capsys.readouterr().out


def test_rename_cancelled_prompt_raises(tmp_path, monkeypatch):
    _make_profiles(tmp_path, a="alpha")
    _feed(monkeypatch, "")
    with pytest.raises(GitSwitcherError, match="Prompt failed"):
        rename.run(tmp_path)


def test_execute_exits_on_failure(tmp_path, monkeypatch):
    _make_profiles(tmp_path, a="alpha")
    _feed(monkeypatch, "")
    with pytest.raises(SystemExit) as info:
        rename.execute(tmp_path)
    assert info.value.code == 1