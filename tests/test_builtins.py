import io
import os

from oslabs.builtins import ShellState, cd, exit_shell, history, pwd


def test_exit_shell():
    assert exit_shell("exit") is True
    assert exit_shell("exit now") is False
    assert exit_shell("ls") is False


def test_cd_changes_directory_and_prompt(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "sub"
    target.mkdir()
    state = ShellState()
    assert cd(f"cd {target}", state) is True
    assert os.path.samefile(os.getcwd(), target)
    assert state.prompt == f"({os.getcwd()})"


def test_cd_alone_goes_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    state = ShellState()
    assert cd("cd", state) is True
    assert os.path.samefile(os.getcwd(), home)


def test_cd_dollar_form_uses_rest_literally(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "dir").mkdir()
    state = ShellState()
    assert cd("cd $dir", state) is True
    assert os.path.samefile(os.getcwd(), tmp_path / "dir")


def test_cd_failure_keeps_prompt(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    state = ShellState(prompt="(before)")
    assert cd(f"cd {tmp_path / 'missing'}", state) is True
    assert state.prompt == "(before)"
    assert "cannot cd to" in capsys.readouterr().err
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_cd_ignores_other_commands():
    state = ShellState(prompt="(p)")
    assert cd("ls -l", state) is False
    assert state.prompt == "(p)"


def test_pwd_prints_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    assert pwd("pwd", out) is True
    assert out.getvalue() == f"{os.getcwd()}\n"


def test_pwd_ignores_other_commands():
    out = io.StringIO()
    assert pwd("pwd -L", out) is False
    assert out.getvalue() == ""