"""Write rendered reports to a file or standard output."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from .constants import STDOUT_INDICATOR
from .errors import ErrorKind, OutputError


def write_output(content: str, destination: str, *, stdout: TextIO | None = None) -> None:
    """Write ``content`` to ``destination``; ``"-"`` means standard output."""

    if not content:
        raise OutputError(ErrorKind.OUTPUT_EMPTY)

    if destination == STDOUT_INDICATOR:
        stream = stdout or sys.stdout
        stream.write(content)
        stream.flush()
        return

    path = Path(destination)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handle = path.open("w", encoding="utf-8")
    except OSError as exc:
        raise OutputError(ErrorKind.OUTPUT_CREATE, path=destination, cause=exc) from exc

    with handle:
        try:
            handle.write(content)
        except OSError as exc:
            raise OutputError(ErrorKind.OUTPUT_WRITE, path=destination, cause=exc) from exc


def describe_destination(destination: str) -> str:
    return "stdout" if destination == STDOUT_INDICATOR else destination


__all__ = ["describe_destination", "write_output"]
