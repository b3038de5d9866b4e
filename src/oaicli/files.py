"""Utilities for working with files and streams."""

import hashlib
import sys
from itertools import islice
from pathlib import Path
from typing import Any, BinaryIO, Iterable, Self, TextIO

import orjson
from pydantic import BaseModel

from oaicli.errors import AppError
from oaicli.types import PathLike


def read_stdin(stream: TextIO | None = None) -> str | None:
    """Read all lines from a text stream until the end of the stream.

    Line terminators are removed and the lines are joined with a single newline. No trailing
    newline is added.

    :param stream: The stream to read. Defaults to standard input.
    :return: The joined text, or None if no lines were read.
    """
    stream = sys.stdin if stream is None else stream
    text: str | None = None
    for line in stream:
        line = line.removesuffix('\n').removesuffix('\r')
        if text is None:
            text = line
        else:
            text += '\n' + line
    return text


def md5sum(path: PathLike, chunk_size: int = 8192) -> str:
    """Calculates the hex MD5 checksum of a file, reading it in chunks.

    :param path: A path to a file.
    :param chunk_size: The size of each chunk.
    :return: The checksum.
    """
    md5 = hashlib.md5()
    with open(path, 'rb') as file:
        for chunk in iter(lambda: file.read(chunk_size), b''):
            md5.update(chunk)
    return md5.hexdigest()


class JSONLWriter:
    """Writes objects to a file in JSONL format.

    The file parent directories are created if they do not exist. An atomic writer writes to a
    partial file next to the path and moves it into place only when the context exits without
    an error, so a failed write leaves an existing file unchanged.
    """

    def __init__(self, path: PathLike, append: bool = False, atomic: bool = False) -> None:
        """Create a new writer.

        :param path: A path to a file to write to.
        :param append: Whether to append to an existing file.
        :param atomic: Whether to replace the file only after every object is written.
        """
        if append and atomic:
            raise ValueError('An atomic writer cannot append to a file.')
        self.path = Path(path)
        self.append = append
        self.atomic = atomic
        self.file: BinaryIO | None = None

    @property
    def partial_path(self) -> Path:
        """The file written to before it replaces the path, when writing atomically."""
        return self.path.with_name(f'{self.path.name}.part')

    def __enter__(self) -> Self:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.atomic:
            self.file = open(self.partial_path, 'wb')
        else:
            self.file = open(self.path, 'ab' if self.append else 'wb')
        return self

    def write(self, item: Any) -> None:
        """Write an object as a single JSON line.

        :param item: A pydantic model or an object orjson can serialize.
        """
        if self.file is None:
            raise ValueError('Cannot write before opening the file.')
        data: bytes
        if isinstance(item, BaseModel):
            data = item.model_dump_json(exclude_none=True).encode('utf-8')
        else:
            data = orjson.dumps(item)
        self.file.write(data)
        self.file.write(b'\n')

    def __exit__(self, exc_type: type[BaseException] | None, *args: Any) -> None:
        if self.file is not None:
            self.file.close()
            self.file = None
        if self.atomic:
            if exc_type is None:
                self.partial_path.replace(self.path)
            else:
                self.partial_path.unlink(missing_ok=True)


def yield_lines(path: PathLike, limit: int | None = None) -> Iterable[str]:
    """Yield non-blank lines as strings from a file.

    :param path: A path to a file.
    :param limit: The maximum number of lines to yield.
    :return: An iterable of lines.
    """
    with open(path, encoding='utf-8') as file:
        yield from islice((line for line in file if line.strip()), limit)


def yield_jsonl(path: PathLike) -> Iterable[Any]:
    """Yield JSON objects from a JSONL file, skipping blank lines.

    :param path: A path to a file.
    :return: An iterable of JSON objects.
    """
    with open(path, 'rb') as file:
        for line in file:
            if line.strip():
                yield orjson.loads(line)


def text_or_stdin(text: str | None, option: str) -> str:
    """Use a text option, reading standard input when it is not set.

    :param text: The value of the option.
    :param option: The option name, used in the error message.
    :return: The text.
    :raises AppError: If neither the option nor standard input provide text, or standard input
        is not valid text.
    """
    if text is not None:
        return text
    try:
        text = read_stdin()
    except UnicodeDecodeError as e:
        raise AppError('Standard input is not valid UTF-8 text.') from e
    if text is None:
        raise AppError(f'Provide {option} or pipe the text to standard input.')
    return text
