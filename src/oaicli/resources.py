"""A module for the resources the CLI app reads and writes."""

from enum import Enum
from typing import Iterable, Self

from pydantic import BaseModel, Field

import oaicli
from oaicli.types import PathLike


class JsonModel(BaseModel):
    """An extension of a Pydantic BaseModel with additional JSON methods."""

    @classmethod
    def from_json(cls, path: PathLike) -> Self:
        """Create an instance from a JSON file.

        :param path: Path to a JSON file.
        :return: A new instance.
        """
        with open(path, encoding='utf-8') as file:
            return cls.model_validate_json(file.read())

    @classmethod
    def yield_from_jsonl(cls, path: PathLike, limit: int | None = None) -> Iterable[Self]:
        """Yields deserialized instances from a JSONL file.

        :param path: Path to a file.
        :param limit: The maximum number of instances to yield.
        :return: An iterable of instances.
        """
        for line in oaicli.files.yield_lines(path, limit=limit):
            yield cls.model_validate_json(line)


class Role(str, Enum):
    """The role of an entity in a conversation."""

    assistant = 'assistant'
    """A role the model adopts."""

    system = 'system'
    """A role for system instructions."""

    user = 'user'
    """A role for entities external to the model, such as a user or agent."""


class Message(JsonModel):
    """A message in a conversation with a generative model."""

    role: Role
    content: str


class Chat(JsonModel):
    """A conversation with a generative model."""

    key: str | None = None
    system_message: str | None = None
    messages: list[Message] = Field(default_factory=list)
