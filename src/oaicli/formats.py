"""Rendering of API objects for the terminal."""

from enum import Enum
from typing import Callable, Iterable

import typer
from pydantic import BaseModel

VERBOSE_INDENT = 2


class Format(str, Enum):
    """How much detail to output."""

    default = 'default'
    """A concise, human-readable summary."""

    verbose = 'verbose'
    """The full JSON representation of each object."""


def render[T: BaseModel](item: T, format: Format, summary: Callable[[T], str]) -> str:
    """Render an object in a format.

    :param item: A Pydantic model, such as an object returned by the OpenAI client.
    :param format: The output format.
    :param summary: Creates the default summary of the object.
    :return: The rendered text.
    """
    if format == Format.verbose:
        return item.model_dump_json(indent=VERBOSE_INDENT, exclude_unset=True)
    return summary(item)


def echo[T: BaseModel](item: T, format: Format, summary: Callable[[T], str]) -> None:
    """Render an object and print it to stdout."""
    typer.echo(render(item, format, summary))


def echo_all[T: BaseModel](items: Iterable[T], format: Format, summary: Callable[[T], str]) -> None:
    """Render and print each object in turn."""
    for item in items:
        echo(item, format, summary)
