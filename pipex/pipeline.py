"""Run ``infile | cmd1 | cmd2 > outfile`` the way a shell pipeline would."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Iterable, Mapping, Optional, Sequence, Union

from pipex.output import putstr_fd
from pipex.strings import split, strjoin

Environment = Union[Mapping[str, str], Iterable[str]]

USAGE = "Usage: /pipex file1 cmd1 cmd2 file2\n"
NOT_FOUND_STATUS = 127
FAILURE_STATUS = 1

_NOT_FOUND_MESSAGE = "Command not found"
_OPEN_ERROR = "Error opening file"
_EXEC_ERROR = "Error executing command"
_OPEN_FLAGS = {
    "r": (os.O_RDONLY, 0),
    "w": (os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644),
}


class PipexError(Exception):
    """A failure that ends the program with ``status``."""

    def __init__(self, message: str, status: int = FAILURE_STATUS) -> None:
        super().__init__(message)
        self.status = status


class CommandNotFound(PipexError):
    """The command string names no program."""

    def __init__(self, message: str = _NOT_FOUND_MESSAGE) -> None:
        super().__init__(message, NOT_FOUND_STATUS)


def _environment(env: Optional[Environment]) -> Environment:
    return os.environ if env is None else env


def _env_dict(env: Environment) -> dict[str, str]:
    if isinstance(env, Mapping):
        return dict(env)
    result: dict[str, str] = {}
    for entry in env:
        name, sep, value = entry.partition("=")
        if sep and name not in result:
            result[name] = value
    return result


def get_env(name: str, env: Optional[Environment] = None) -> Optional[str]:
    """Value of ``name`` in ``env``, a mapping or a list of ``NAME=value`` strings."""
    env = _environment(env)
    if isinstance(env, Mapping):
        return env.get(name)
    for entry in env:
        key, sep, value = entry.partition("=")
        if sep and key == name:
            return value
    return None


def find_path(cmd: str, env: Optional[Environment] = None) -> str:
    """First executable ``dir/word`` along PATH for the command's first word.

    Falls back to ``cmd`` itself when nothing on PATH matches.
    """
    search = get_env("PATH", env)
    words = split(cmd, " ")
    if not search or not words:
        return cmd
    for directory in split(search, ":"):
        candidate = strjoin(strjoin(directory, "/"), words[0])
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return cmd


def open_file(filename: Union[str, os.PathLike], mode: str) -> int:
    """Open ``filename`` for reading (``"r"``) or truncating write (``"w"``).

    Returns a raw file descriptor.
    """
    try:
        flags, permissions = _OPEN_FLAGS[mode]
    except KeyError:
        raise ValueError(f"mode must be 'r' or 'w', got {mode!r}") from None
    try:
        return os.open(filename, flags, permissions)
    except OSError as exc:
        raise PipexError(f"{_OPEN_ERROR}: {exc.strerror}") from exc


def resolve_command(
    cmd: Optional[str], env: Optional[Environment] = None
) -> tuple[str, list[str]]:
    """Split ``cmd`` on spaces and locate its program: ``(path, argv)``."""
    if not cmd:
        raise CommandNotFound()
    argv = split(cmd, " ")
    if not argv:
        raise CommandNotFound()
    return find_path(argv[0], env), argv


def _start(
    cmd: str, env: Environment, stdin: int, stdout: int
) -> Union[subprocess.Popen, int]:
    """Start ``cmd``, or report why it could not start and return its status."""
    try:
        path, argv = resolve_command(cmd, env)
    except CommandNotFound as exc:
        putstr_fd(f"{exc}\n", 2)
        return exc.status
    # A bare name is taken relative to the working directory, never searched again.
    executable = path if "/" in path else os.path.join(".", path)
    try:
        return subprocess.Popen(
            argv,
            executable=executable,
            stdin=stdin,
            stdout=stdout,
            env=_env_dict(env),
        )
    except OSError as exc:
        putstr_fd(f"{_EXEC_ERROR}: {exc.strerror}\n", 2)
        return FAILURE_STATUS


def _wait(started: Union[subprocess.Popen, int]) -> int:
    if isinstance(started, int):
        return started
    status = started.wait()
    return 128 - status if status < 0 else status


def run_pipeline(
    infile: Union[str, os.PathLike],
    cmd1: str,
    cmd2: str,
    outfile: Union[str, os.PathLike],
    env: Optional[Environment] = None,
) -> int:
    """Feed ``infile`` through ``cmd1`` into ``cmd2`` and write ``outfile``.

    Returns the exit status of ``cmd2``.
    """
    env = _environment(env)
    in_fd = open_file(infile, "r")
    try:
        out_fd = open_file(outfile, "w")
    except PipexError:
        os.close(in_fd)
        raise
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        os.close(in_fd)
        os.close(out_fd)
        raise PipexError(f"Error creating pipe: {exc.strerror}") from exc
    try:
        first = _start(cmd1, env, stdin=in_fd, stdout=write_fd)
    finally:
        os.close(write_fd)
        os.close(in_fd)
    try:
        second = _start(cmd2, env, stdin=read_fd, stdout=out_fd)
    finally:
        os.close(read_fd)
        os.close(out_fd)
    _wait(first)
    return _wait(second)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        putstr_fd(USAGE, 2)
        return FAILURE_STATUS
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile)
    except PipexError as exc:
        putstr_fd(f"{exc}\n", 2)
        return exc.status