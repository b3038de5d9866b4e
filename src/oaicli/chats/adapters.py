"""A module for adapters that convert chats into formats the OpenAI API accepts."""

from typing import Iterable

from loguru import logger
from openai.types.chat import (
    ChatCompletionAssistantMessageParam,
    ChatCompletionMessageParam,
    ChatCompletionSystemMessageParam,
    ChatCompletionUserMessageParam,
)
from pydantic import ValidationError
from tqdm import tqdm

from oaicli.errors import AppError
from oaicli.files import JSONLWriter
from oaicli.resources import Chat, JsonModel, Message, Role
from oaicli.types import PathLike
from oaicli.utils import shorten


class OpenAIChatTune(JsonModel):
    """A chat in the format for fine-tuning OpenAI chat models."""

    messages: list[ChatCompletionMessageParam]


class OpenAIChatAdapter:
    """Adapts chats for OpenAI."""

    def adapt_chat(self, chat: Chat) -> list[ChatCompletionMessageParam]:
        """Adapt a chat into chat completion messages.

        The system message, if any, comes first.

        :param chat: A chat to adapt.
        :return: Messages in the OpenAI format.
        """
        messages: list[ChatCompletionMessageParam] = []
        if chat.system_message:
            messages.append(
                self.adapt_message(Message(role=Role.system, content=chat.system_message))
            )
        return self.adapt_messages(chat.messages, target=messages)

    def adapt_tune(self, chat: Chat) -> OpenAIChatTune:
        """Adapt a chat for fine-tuning.

        :param chat: A chat to adapt.
        :return: A tuning example.
        """
        return OpenAIChatTune(messages=self.adapt_chat(chat))

    def adapt_file_tune(self, input_path: PathLike, output_path: PathLike) -> int:
        """Adapt a chat file for fine-tuning.

        Tuning examples are written to a JSONL file in the format OpenAI expects. The output
        file is only replaced when every chat is adapted.

        :param input_path: A path to a chat JSONL file.
        :param output_path: Path to save the output file.
        :return: The number of examples written.
        """
        count = 0
        with JSONLWriter(path=output_path, atomic=True) as writer:
            chats = tqdm(Chat.yield_from_jsonl(input_path), desc='Adapting chats')
            try:
                for i, chat in enumerate(chats):
                    if not chat.messages:
                        raise AppError(f'No messages in chat at index {i}: {shorten(str(chat))}')
                    if chat.messages[-1].role != Role.assistant:
                        logger.warning(f'Chat at index {i} does not end with an assistant message.')
                    writer.write(self.adapt_tune(chat))
                    count += 1
            except ValidationError as e:
                raise AppError(f'Invalid chat at index {count} in {input_path}: {e}') from e
        return count

    def adapt_message(self, message: Message) -> ChatCompletionMessageParam:
        """Adapt a message for OpenAI.

        :param message: A message to adapt.
        :return: A message in the OpenAI format.
        """
        role = message.role
        match role:
            case Role.assistant:
                return ChatCompletionAssistantMessageParam(
                    role='assistant',
                    content=message.content,
                )
            case Role.system:
                return ChatCompletionSystemMessageParam(
                    role='system',
                    content=message.content,
                )
            case Role.user:
                return ChatCompletionUserMessageParam(
                    role='user',
                    content=message.content,
                )
            case _:
                raise ValueError(f'Unsupported role {role}')

    def adapt_messages(
        self,
        messages: Iterable[Message],
        target: list[ChatCompletionMessageParam] | None = None,
    ) -> list[ChatCompletionMessageParam]:
        """Adapt messages for OpenAI.

        If the target list is not set, a new list is created and returned. Otherwise, the target
        list is appended to and returned.

        :param messages: Messages to adapt.
        :param target: A list to append to.
        :return: Messages in the OpenAI format.
        """
        result: list[ChatCompletionMessageParam] = [] if target is None else target
        for message in messages:
            result.append(self.adapt_message(message))
        return result
