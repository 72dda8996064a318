import os
import signal
import subprocess
import sys

import pytest

from oslabs.commands import BackCommand, CommandType, ExecCommand, PipeCommand
from oslabs.execution import (
    FAILED_STATUS,
    ExecutionError,
    build_environ,
    run,
    spawn,
    split_environ,
)


def py(code):
    return [sys.executable, "-c", code]


def redir(argv, **files):
    return ExecCommand(argv=argv, type=CommandType.REDIR, **files)


def test_split_environ_basic():
    assert split_environ("KEY=value") == ("KEY", "value")


def test_split_environ_keeps_later_equals():
    assert split_environ("A=b=c") == ("A", "b=c")


def test_split_environ_without_equals_raises():
    with pytest.raises(ValueError):
        split_environ("plain")


def test_build_environ_overrides_and_skips_plain():
    env = build_environ(["FOO=bar", "plain", "X=2"], {"X": "1", "Y": "y"})
    assert env == {"X": "2", "Y": "y", "FOO": "bar"}


def test_build_environ_leaves_base_untouched():
    base = {"X": "1"}
    build_environ(["X=9"], base)
    assert base == {"X": "1"}


def test_spawn_captures_output():
    processes = spawn(ExecCommand(argv=py("print('hi')")), stdout=subprocess.PIPE)
    out, _ = processes[-1].communicate()
    assert out == b"hi\n"


def test_spawn_passes_assignments():
    cmd = ExecCommand(
        argv=py("import os; print(os.environ['OSLABS_VAR'])"),
        eargv=["OSLABS_VAR=xyz"],
    )
    out, _ = spawn(cmd, stdout=subprocess.PIPE)[-1].communicate()
    assert out == b"xyz\n"


def test_run_returns_exit_code():
    assert run(ExecCommand(argv=py("import sys; sys.exit(7)"))) == 7


def test_run_reports_signal_as_negative():
    code = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
    assert run(ExecCommand(argv=py(code))) == -signal.SIGKILL


def test_run_redirects_stdout_to_file(tmp_path):
    target = tmp_path / "out.txt"
    assert run(redir(py("print('written')"), out_file=str(target))) == 0
    assert target.read_text() == "written\n"


def test_output_file_is_owner_only(tmp_path):
    target = tmp_path / "out.txt"
    run(redir(py("pass"), out_file=str(target)))
    assert target.stat().st_mode & 0o777 == 0o600


def test_run_redirects_stdin_from_file(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("abc")
    target = tmp_path / "out.txt"
    cmd = redir(
        py("import sys; print(sys.stdin.read().upper())"),
        in_file=str(source),
        out_file=str(target),
    )
    assert run(cmd) == 0
    assert target.read_text() == "ABC\n"


def test_run_merges_stderr_into_stdout(tmp_path):
    target = tmp_path / "out.txt"
    cmd = redir(
        py("import sys; sys.stderr.write('err')"),
        out_file=str(target),
        err_file="&1",
    )
    run(cmd)
    assert target.read_text() == "err"


def test_run_redirects_stderr_to_file(tmp_path):
    target = tmp_path / "err.txt"
    run(redir(py("import sys; sys.stderr.write('oops')"), err_file=str(target)))
    assert target.read_text() == "oops"


def test_missing_input_file_raises(tmp_path):
    cmd = redir(py("pass"), in_file=str(tmp_path / "missing"))
    with pytest.raises(ExecutionError) as info:
        spawn(cmd)
    assert info.value.strerror.startswith("Error opening file")


def test_missing_program_raises():
    with pytest.raises(ExecutionError) as info:
        spawn(ExecCommand(argv=["oslabs-no-such-program"]))
    assert "cannot exec file oslabs-no-such-program" in info.value.strerror


def test_empty_command_only_redirects(tmp_path):
    target = tmp_path / "created.txt"
    assert run(redir([], out_file=str(target))) == 0
    assert target.read_bytes() == b""


def test_pipe_feeds_right_side():
    left = ExecCommand(argv=py("print('abc')"))
    right = ExecCommand(argv=py("import sys; print(sys.stdin.read().upper(), end='')"))
    processes = spawn(PipeCommand(left, right), stdout=subprocess.PIPE)
    out, _ = processes[-1].communicate()
    for process in processes:
        process.wait()
    assert out == b"ABC\n"
    assert len(processes) == 2


def test_pipe_status_is_right_side():
    left = ExecCommand(argv=py("pass"))
    right = ExecCommand(argv=py("import sys; sys.exit(3)"))
    assert run(PipeCommand(left, right)) == 3


def test_pipe_right_killed_gives_failed_status():
    code = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
    left = ExecCommand(argv=py("pass"))
    assert run(PipeCommand(left, ExecCommand(argv=py(code)))) == FAILED_STATUS


def test_pipe_left_missing_still_runs_right(capsys):
    left = ExecCommand(argv=["oslabs-no-such-program"])
    right = ExecCommand(argv=py("import sys; print(len(sys.stdin.read()))"))
    processes = spawn(PipeCommand(left, right), stdout=subprocess.PIPE)
    out, _ = processes[-1].communicate()
    assert out == b"0\n"
    assert "cannot exec file" in capsys.readouterr().err


def test_pipe_right_missing_fails(capsys):
    left = ExecCommand(argv=py("pass"))
    right = ExecCommand(argv=["oslabs-no-such-program"])
    assert run(PipeCommand(left, right)) == FAILED_STATUS


def test_background_runs_in_own_group():
    code = "import os; print(os.getpgrp() == os.getpid())"
    processes = spawn(BackCommand(ExecCommand(argv=py(code))), stdout=subprocess.PIPE)
    out, _ = processes[-1].communicate()
    assert out == b"True\n"
    assert os.getpgrp() != processes[-1].pid