"""Shared types and typed command-line values."""

import os
from typing import Self

import typer
from pydantic import BaseModel, ConfigDict, Field, ValidationError

type PathLike = str | os.PathLike[str]


class ArgumentValue(BaseModel):
    """A numeric value that can be parsed from a command-line argument."""

    model_config = ConfigDict(frozen=True)

    value: float

    def __init__(self, value: float) -> None:
        super().__init__(value=value)

    @classmethod
    def from_argument(cls, argument: str) -> Self | None:
        """Create an instance from a command-line argument.

        :param argument: The raw argument string.
        :return: A new instance, or None if the argument is not a number.
        """
        try:
            value = float(argument)
        except ValueError:
            return None
        return cls(value)

    def __float__(self) -> float:
        return self.value


class Percentage(ArgumentValue):
    """A fraction between 0 and 1, such as a nucleus sampling probability mass."""

    value: float = Field(ge=0.0, le=1.0)


class Penalty(ArgumentValue):
    """A penalty between -2 and 2 applied to repeated tokens."""

    value: float = Field(ge=-2.0, le=2.0)


def _parse[T: ArgumentValue](cls: type[T], argument: str) -> T:
    try:
        result = cls.from_argument(argument)
    except ValidationError as e:
        errors = '; '.join(error['msg'] for error in e.errors())
        raise typer.BadParameter(f'{argument!r} is out of range: {errors}') from e
    if result is None:
        raise typer.BadParameter(f'{argument!r} is not a valid number.')
    return result


def parse_percentage(argument: str) -> Percentage:
    """Parse a Percentage for use as a Typer option parser."""
    return _parse(Percentage, argument)


def parse_penalty(argument: str) -> Penalty:
    """Parse a Penalty for use as a Typer option parser."""
    return _parse(Penalty, argument)


def value_of(argument: ArgumentValue | None) -> float | None:
    """Unwrap an optional argument value."""
    return None if argument is None else argument.value
