"""Locating commands on PATH and running two of them joined by a pipe."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Any, Mapping

from pipex.strings import split

__all__ = [
    "PipexError",
    "CommandNotFoundError",
    "find_command",
    "parse_command",
    "run_pipeline",
]

GRN = "\033[1;32m"
YEL = "\033[0;33m"
YLW = "\033[1;33m"
RED = "\033[1;31m"
RST = "\033[0m"

EXIT_FAILURE = 1


class PipexError(Exception):
    """A stage of the pipeline could not be started."""


class CommandNotFoundError(PipexError):
    """No executable of the given name exists in any PATH directory."""

    def __init__(self, command: str | None) -> None:
        self.command = command
        super().__init__(f"{command or ''}: command not found")


def parse_command(arg: str) -> list[str]:
    """Split a command line into words on single spaces, dropping empty words."""
    return split(arg, " ")


def find_command(cmd: str | None, env: Mapping[str, str] | None = None) -> str:
    """Return the first PATH entry joined with cmd that is executable.

    The name is always looked up through PATH, even if it holds a slash.
    """
    environment = os.environ if env is None else env
    path = environment.get("PATH")
    if cmd and path:
        for directory in split(path, ":"):
            candidate = f"{directory}/{cmd}"
            if os.access(candidate, os.X_OK):
                return candidate
    raise CommandNotFoundError(cmd)


def report(error: Exception) -> None:
    """Write an error line to standard error."""
    sys.stderr.write(f"{RED}Error: {RST}{error}\n")
    sys.stderr.flush()


def _spawn(arg: str, env: dict[str, str], stdin: Any, stdout: Any) -> subprocess.Popen:
    args = parse_command(arg)
    path = find_command(args[0] if args else None, env)
    try:
        return subprocess.Popen(args, executable=path, stdin=stdin, stdout=stdout, env=env)
    except OSError as exc:
        raise PipexError(f"execve: {exc.strerror}") from exc


def _first_stage(infile: str, cmd: str, env: dict[str, str]) -> subprocess.Popen | None:
    try:
        source = open(infile, "rb")
    except OSError as exc:
        report(PipexError(f"{infile}: {exc.strerror}"))
        return None
    with source:
        try:
            return _spawn(cmd, env, stdin=source, stdout=subprocess.PIPE)
        except PipexError as exc:
            report(exc)
            return None


def _second_stage(
    outfile: str, cmd: str, env: dict[str, str], upstream: IO[bytes] | int
) -> subprocess.Popen | None:
    try:
        sink = open(outfile, "wb")
    except OSError as exc:
        report(PipexError(f"{outfile}: {exc.strerror}"))
        return None
    with sink:
        try:
            return _spawn(cmd, env, stdin=upstream, stdout=sink)
        except PipexError as exc:
            report(exc)
            return None


def _wait(process: subprocess.Popen | None) -> int:
    return EXIT_FAILURE if process is None else process.wait()


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> list[int]:
    """Run cmd1 < infile | cmd2 > outfile and return both exit statuses.

    A stage that cannot start is reported on standard error and counts
    as having exited with status 1; the other stage still runs.  The
    output file is created or truncated before cmd2 is looked up.
    """
    environment = dict(os.environ if env is None else env)
    first = _first_stage(infile, cmd1, environment)
    upstream = first.stdout if first is not None else subprocess.DEVNULL
    try:
        second = _second_stage(outfile, cmd2, environment, upstream)
    finally:
        if first is not None and first.stdout is not None:
            first.stdout.close()
    return [_wait(first), _wait(second)]