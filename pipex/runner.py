"""Running a chain of commands between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import IO, AnyStr, Optional, Union

from pipex.lines import LineReader
from pipex.resolve import CommandNotFoundError, PipexError, resolve_command

HERE_DOC = "here_doc"

USAGE = (
    "------------------ ERROR ------------------\n"
    "$ ./pipex infile cmd1 cmd2 ... cmdn outfile\n"
    "$ ./pipex here_doc LIMITER cmd1 cmd2 file"
)

_FILE_MODE = 0o644


class UsageError(PipexError):
    """The command line does not have the expected shape."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message, 1)


def read_here_doc(stream: Union[IO[str], IO[bytes], int], limiter: str) -> AnyStr:
    """Read lines from ``stream`` until one that starts with ``limiter``.

    The limiter line is not included.  Text streams give ``str``; binary
    streams and descriptors give ``bytes``.  Without a limiter line the whole
    stream is returned.
    """
    collected: list = []
    marker: Union[str, bytes, None] = None
    for line in LineReader(stream):
        if marker is None:
            marker = limiter.encode() if isinstance(line, bytes) else limiter
        if line.startswith(marker):
            break
        collected.append(line)
    if collected:
        return collected[0][:0].join(collected)
    if isinstance(stream, int) or "b" in getattr(stream, "mode", ""):
        return b""
    return b"" if isinstance(getattr(stream, "buffer", None), type(None)) and _is_binary(stream) else ""


def _is_binary(stream: object) -> bool:
    return isinstance(stream, (bytes, bytearray)) or hasattr(stream, "getbuffer")


def _env_dict(env: Optional[Mapping[str, str]]) -> Optional[dict]:
    return None if env is None else dict(env)


def _run_middle(command: str, data: bytes, env: Optional[Mapping[str, str]]) -> bytes:
    """Run one inner stage; a failure is reported and yields empty output."""
    try:
        path, args = resolve_command(command, env)
        completed = subprocess.run(
            args,
            executable=path,
            input=data,
            stdout=subprocess.PIPE,
            env=_env_dict(env),
            check=False,
        )
    except CommandNotFoundError as err:
        print(err.message, file=sys.stderr)
        return b""
    except OSError:
        print(CommandNotFoundError().message, file=sys.stderr)
        return b""
    return completed.stdout


def _run_stages(
    commands: Sequence[str],
    data: bytes,
    out_fd: int,
    env: Optional[Mapping[str, str]],
) -> int:
    *middle, last = commands
    for command in middle:
        data = _run_middle(command, data, env)
    path, args = resolve_command(last, env)
    try:
        completed = subprocess.run(
            args,
            executable=path,
            input=data,
            stdout=out_fd,
            env=_env_dict(env),
            check=False,
        )
    except OSError as exc:
        raise CommandNotFoundError() from exc
    return completed.returncode


def _open_output(outfile: Union[str, os.PathLike], append: bool) -> int:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        return os.open(outfile, flags, _FILE_MODE)
    except OSError as exc:
        raise PipexError("Unable to open outFile", 1) from exc


def run_pipeline(
    infile: Union[str, os.PathLike],
    commands: Sequence[str],
    outfile: Union[str, os.PathLike],
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed ``infile`` through ``commands`` and write the result to ``outfile``.

    The output file is truncated.  Returns the exit status of the last
    command.  Raises :class:`PipexError` when a file cannot be opened and
    :class:`CommandNotFoundError` when the last command cannot be run.
    """
    if not commands:
        raise UsageError()
    try:
        with open(infile, "rb") as source:
            data = source.read()
    except OSError as exc:
        raise PipexError("Unable to open input_file", 1) from exc
    out_fd = _open_output(outfile, append=False)
    try:
        return _run_stages(commands, data, out_fd, env)
    finally:
        os.close(out_fd)


def run_here_doc(
    limiter: str,
    commands: Sequence[str],
    outfile: Union[str, os.PathLike],
    stdin: Union[IO[str], IO[bytes], int, None] = None,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed lines read up to ``limiter`` through ``commands``, appending to ``outfile``.

    Returns the exit status of the last command.
    """
    if not commands:
        raise UsageError()
    out_fd = _open_output(outfile, append=True)
    try:
        source = sys.stdin.buffer if stdin is None else stdin
        text = read_here_doc(source, limiter)
        data = text.encode() if isinstance(text, str) else bytes(text)
        return _run_stages(commands, data, out_fd, env)
    finally:
        os.close(out_fd)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) < 4:
            raise UsageError()
        if args[0] == HERE_DOC:
            return run_here_doc(args[1], args[2:-1], args[-1])
        return run_pipeline(args[0], args[1:-1], args[-1])
    except UsageError as err:
        print(err.message)
        return err.status
    except PipexError as err:
        print(err.message, file=sys.stderr)
        return err.status


if __name__ == "__main__":
    sys.exit(main())