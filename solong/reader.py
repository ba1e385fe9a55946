"""Line-oriented reading of map files in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr

DEFAULT_BUFFER_SIZE = 42


def _split_chunks(stream: IO[AnyStr], buffer_size: int) -> Iterator[AnyStr]:
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending = chunk if pending is None else pending + chunk
        newline = "\n" if isinstance(pending, str) else b"\n"
        while (index := pending.find(newline)) >= 0:
            yield pending[: index + 1]
            pending = pending[index + 1 :]
    if pending:
        yield pending


def read_lines(
    stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, reading ``buffer_size`` units at a time.

    Every line keeps its trailing newline; a final line without one is
    yielded as it is. Works with text and binary streams alike.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    return _split_chunks(stream, buffer_size)


def read_map_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return every line of the file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(read_lines(handle))