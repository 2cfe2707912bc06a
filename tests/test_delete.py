import io
import os

import pytest

from gitswitcher.commands.delete import execute, run
from gitswitcher.utils import GitSwitcherError, get_config_dir, get_git_config_path


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


@pytest.fixture
def config_dir(tmp_path):
    directory = get_config_dir(tmp_path)
    (directory / "home").write_text("home content")
    (directory / "work").write_text("work content")
    return directory


def test_run_without_profiles(tmp_path, capsys):
    assert run(tmp_path) is None
    assert "No git configuration profiles found to delete" in capsys.readouterr().out


def test_delete_inactive_profile(tmp_path, config_dir, monkeypatch, capsys):
    git_config = get_git_config_path(tmp_path)
    os.symlink(config_dir / "work", git_config)
    _feed(monkeypatch, "1\ny\n")
    assert run(tmp_path) == "home"
    assert not (config_dir / "home").exists()
    assert git_config.read_text() == "work content"
    out = capsys.readouterr().out
    assert "(Current: work)" in out
    assert "also removed" not in out


def test_delete_active_profile_removes_gitconfig(tmp_path, config_dir, monkeypatch, capsys):
    git_config = get_git_config_path(tmp_path)
    os.symlink(config_dir / "work", git_config)
    _feed(monkeypatch, "\ny\n")
    assert run(tmp_path) == "work"
    assert not (config_dir / "work").exists()
    assert not git_config.exists()
    assert not git_config.is_symlink()
    assert "Current .gitconfig was also removed" in capsys.readouterr().out


def test_delete_profile_matched_by_content(tmp_path, config_dir, monkeypatch):
    git_config = get_git_config_path(tmp_path)
    git_config.write_text("home content")
    _feed(monkeypatch, "\ny\n")
    assert run(tmp_path) == "home"
    assert not git_config.exists()
    assert (config_dir / "work").exists()


def test_delete_declined(tmp_path, config_dir, monkeypatch, capsys):
    _feed(monkeypatch, "2\nn\n")
    assert run(tmp_path) is None
    assert (config_dir / "work").exists()
    out = capsys.readouterr().out
    assert "(Current: none)" in out
    assert 'Profile "work" not deleted.' in out


def test_delete_cancelled_at_selection(tmp_path, config_dir, monkeypatch):
    _feed(monkeypatch, "")
    with pytest.raises(GitSwitcherError, match="Prompt failed"):
        run(tmp_path)


def test_delete_cancelled_at_confirmation(tmp_path, config_dir, monkeypatch):
    _feed(monkeypatch, "1\n")
    with pytest.raises(GitSwitcherError, match="Confirmation failed"):
        run(tmp_path)
    assert (config_dir / "home").exists()


def test_execute_cancelled_exits(tmp_path, config_dir, monkeypatch, capsys):
    _feed(monkeypatch, "")
    with pytest.raises(SystemExit) as info:
        execute(tmp_path)
    assert info.value.code == 1
    assert "Error: Prompt failed" in capsys.readouterr().err