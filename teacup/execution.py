"""Run blocking commands, such as editors, in the program's terminal."""

from __future__ import annotations

import io
import subprocess
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, runtime_checkable

__all__ = [
    "ExecCommand",
    "ExecCallback",
    "OsExecCommand",
    "ExecMsg",
    "exec_command",
    "exec_process",
]

ExecCallback = Callable[[Optional[BaseException]], Any]


@runtime_checkable
class ExecCommand(Protocol):
    """Something that runs in a blocking fashion in the current terminal."""

    def run(self) -> None:
        ...

    def set_stdin(self, stream: Any) -> None:
        ...

    def set_stdout(self, stream: Any) -> None:
        ...

    def set_stderr(self, stream: Any) -> None:
        ...


def _has_fileno(stream: Any) -> bool:
    try:
        stream.fileno()
    except (AttributeError, OSError, ValueError):
        return False
    return True


def _write_to(stream: Any, data: bytes) -> None:
    if isinstance(stream, io.TextIOBase):
        stream.write(data.decode("utf-8", errors="replace"))
    else:
        stream.write(data)
    stream.flush()


class OsExecCommand:
    """An operating-system process that satisfies :class:`ExecCommand`.

    Streams left unset are filled in with the program's own by the
    ``set_*`` methods; streams already set are kept.
    """

    def __init__(
        self,
        args: Sequence[str],
        *,
        stdin: Any = None,
        stdout: Any = None,
        stderr: Any = None,
        cwd: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.args = list(args)
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.cwd = cwd
        self.env = env

    def set_stdin(self, stream: Any) -> None:
        """Use ``stream`` as input unless input is already set."""
        if self.stdin is None:
            self.stdin = stream

    def set_stdout(self, stream: Any) -> None:
        """Use ``stream`` as output unless output is already set."""
        if self.stdout is None:
            self.stdout = stream

    def set_stderr(self, stream: Any) -> None:
        """Use ``stream`` for errors unless it is already set."""
        if self.stderr is None:
            self.stderr = stream

    def run(self) -> None:
        """Run the process to completion.

        Raises ``CalledProcessError`` on a non-zero exit and ``OSError``
        when the process cannot be started.
        """
        stdin_data: Optional[bytes] = None
        stdin_arg: Any = self.stdin
        if self.stdin is not None and not _has_fileno(self.stdin):
            data = self.stdin.read()
            stdin_data = data.encode("utf-8") if isinstance(data, str) else bytes(data)
            stdin_arg = subprocess.PIPE

        pipe_stdout = self.stdout is not None and not _has_fileno(self.stdout)
        pipe_stderr = self.stderr is not None and not _has_fileno(self.stderr)

        with subprocess.Popen(
            self.args,
            stdin=stdin_arg,
            stdout=subprocess.PIPE if pipe_stdout else self.stdout,
            stderr=subprocess.PIPE if pipe_stderr else self.stderr,
            cwd=self.cwd,
            env=None if self.env is None else dict(self.env),
        ) as proc:
            out, err = proc.communicate(stdin_data)

        if pipe_stdout and out:
            _write_to(self.stdout, out)
        if pipe_stderr and err:
            _write_to(self.stderr, err)
        if proc.returncode != 0:
            raise subprocess.CalledProcessError(proc.returncode, self.args)


@dataclass(frozen=True)
class ExecMsg:
    """Asks the program to run ``cmd`` and report back through ``fn``."""

    cmd: ExecCommand
    fn: Optional[ExecCallback] = None


def exec_command(command: ExecCommand, callback: Optional[ExecCallback]) -> Callable[[], ExecMsg]:
    """Command: pause the program, run ``command``, then resume.

    ``callback`` receives the error raised, or ``None``, and returns the
    message to send to the program.
    """
    msg = ExecMsg(command, callback)
    return lambda: msg


def exec_process(
    args: Sequence[str], callback: Optional[ExecCallback]
) -> Callable[[], ExecMsg]:
    """Command: pause the program while an operating-system process runs."""
    return exec_command(OsExecCommand(args), callback)