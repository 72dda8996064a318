from oslabs.commands import (
    BackCommand,
    CommandType,
    ExecCommand,
    PipeCommand,
    pipe_command,
)


def test_pipe_without_right_side_returns_left():
    left = ExecCommand(scmd="ls", argv=["ls"])
    assert pipe_command(left, None) is left


def test_pipe_joins_both_sides():
    left = ExecCommand(scmd="ls", argv=["ls"])
    right = ExecCommand(scmd="wc", argv=["wc"])
    joined = pipe_command(left, right)
    assert isinstance(joined, PipeCommand)
    assert joined.left is left
    assert joined.right is right
    assert joined.type == CommandType.PIPE
    assert joined.scmd == ""


def test_back_command_copies_source_text():
    inner = ExecCommand(scmd="sleep 5 ", argv=["sleep", "5"])
    back = BackCommand(inner)
    assert back.scmd == inner.scmd
    assert back.c is inner
    assert back.type == CommandType.BACK


def test_exec_counts_follow_lists():
    cmd = ExecCommand(scmd="A=1 env x", argv=["env", "x"], eargv=["A=1"])
    assert cmd.argc == len(cmd.argv)
    assert cmd.eargc == len(cmd.eargv)
    assert cmd.type == CommandType.EXEC


def test_command_types_match_numbering():
    assert [t.value for t in CommandType] == [1, 2, 3, 4]
    assert CommandType(3) is CommandType.REDIR