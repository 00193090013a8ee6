"""Word sources: whitespace-delimited words from files and streams."""
import os
from typing import Iterator, TextIO, Union

PathLike = Union[str, os.PathLike]


def iter_words(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated words from an open text stream, line by line."""
    for line in stream:
        yield from line.split()


def read_words(path: PathLike) -> Iterator[str]:
    """Yield the words of a UTF-8 text file.

    The file is opened before the first word is requested, so a missing
    file raises FileNotFoundError at the call site rather than on iteration.
    """
    stream = open(path, "r", encoding="utf-8")
    return _drain(stream)


def _drain(stream: TextIO) -> Iterator[str]:
    with stream:
        yield from iter_words(stream)


def count_words(path: PathLike) -> int:
    with open(path, "r", encoding="utf-8") as f:
        return sum(1 for _ in iter_words(f))
