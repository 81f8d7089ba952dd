"""Utility helpers for input/output streams and diagnostics."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO, Union

PathLike = Union[str, Path]

STDIO = "-"


def read_input(path: PathLike) -> bytes:
    """Read the whole input, ``-`` meaning standard input."""
    if str(path) == STDIO:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


@contextmanager
def open_output(path: PathLike) -> Iterator[TextIO]:
    """Yield a UTF-8 text stream for *path*; ``-`` is stdout and is left open."""
    if str(path) == STDIO:
        yield sys.stdout
        sys.stdout.flush()
        return

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8", newline="") as fh:
        yield fh


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["STDIO", "open_output", "read_input", "warn"]
