import io
import subprocess
import sys

import pytest

from teacup.execution import ExecCommand, ExecMsg, OsExecCommand, exec_command, exec_process


def _python(code):
    return [sys.executable, "-c", code]


def test_exec_process_builds_message():
    def callback(err):
        return ("done", err)

    msg = exec_process(_python("pass"), callback)()
    assert isinstance(msg, ExecMsg)
    assert msg.fn is callback
    assert msg.cmd.args == _python("pass")


def test_exec_command_keeps_command():
    cmd = OsExecCommand(_python("pass"))
    msg = exec_command(cmd, None)()
    assert msg.cmd is cmd
    assert msg.fn is None


def test_os_exec_command_is_exec_command():
    cmd = OsExecCommand(["x"])
    assert isinstance(cmd, ExecCommand)
    assert cmd.args == ["x"]
    assert cmd.stdout is None


def test_successful_command_runs():
    out = io.BytesIO()
    cmd = OsExecCommand(_python("print('hi')"))
    cmd.set_stdout(out)
    cmd.run()
    assert out.getvalue().strip() == b"hi"


def test_failing_command_raises():
    cmd = OsExecCommand(_python("import sys; sys.exit(1)"))
    with pytest.raises(subprocess.CalledProcessError) as info:
        cmd.run()
    assert info.value.returncode == 1


def test_invalid_command_raises():
    cmd = OsExecCommand(["teacup-no-such-command-xyz"])
    with pytest.raises(OSError):
        cmd.run()


def test_stdin_from_buffer():
    out = io.StringIO()
    cmd = OsExecCommand(_python("import sys; sys.stdout.write(sys.stdin.read().upper())"))
    cmd.set_stdin(io.BytesIO(b"abc"))
    cmd.set_stdout(out)
    cmd.run()
    assert out.getvalue() == "ABC"


def test_stderr_to_buffer():
    err = io.BytesIO()
    cmd = OsExecCommand(_python("import sys; sys.stderr.write('oops')"))
    cmd.set_stderr(err)
    cmd.run()
    assert err.getvalue() == b"oops"


def test_setters_do_not_override():
    first = io.BytesIO()
    second = io.BytesIO()
    cmd = OsExecCommand(["x"], stdout=first)
    cmd.set_stdout(second)
    cmd.set_stdin(second)
    cmd.set_stderr(second)
    assert cmd.stdout is first
    assert cmd.stdin is second
    assert cmd.stderr is second


def test_callback_receives_error():
    results = []
    msg = exec_process(_python("import sys; sys.exit(3)"), results.append)()
    try:
        msg.cmd.run()
    except subprocess.CalledProcessError as exc:
        msg.fn(exc)
    assert len(results) == 1
    assert results[0].returncode == 3