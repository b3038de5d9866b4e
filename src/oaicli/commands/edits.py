"""Commands for editing text by following an instruction.

The edits endpoint has been retired, so edits are made with chat completions. The instruction
is sent as the system message and the text to edit as the user message.
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from openai.types.chat import ChatCompletion

from oaicli.chats.adapters import OpenAIChatAdapter
from oaicli.client import given
from oaicli.commands.completions import CountOption, TemperatureOption, TopPOption
from oaicli.config import (
    ApiKeyOption,
    DebugOption,
    EnvOption,
    OrgKeyOption,
    VerboseOption,
    build_config,
)
from oaicli.files import text_or_stdin
from oaicli.formats import echo
from oaicli.resources import Chat, Message, Role
from oaicli.types import value_of

app = typer.Typer(no_args_is_help=True, help='Edit text by following an instruction.')

DEFAULT_MODEL = 'gpt-4o-mini'


def edit_chat(instruction: str, text: str) -> Chat:
    """Create a chat that asks a model to edit a text.

    :param instruction: How to edit the text.
    :param text: The text to edit.
    :return: A chat with a single user message.
    """
    return Chat(
        system_message=(
            'Edit the text sent by the user by following the instruction below. '
            'Reply with the edited text only.\n\n'
            f'Instruction: {instruction}'
        ),
        messages=[Message(role=Role.user, content=text)],
    )


def _summary(completion: ChatCompletion) -> str:
    return '\n'.join(choice.message.content or '' for choice in completion.choices)


@app.command()
def create(
    instruction: Annotated[str, typer.Option(help='How the model should edit the input.')],
    input_text: Annotated[
        Optional[str],
        typer.Option(
            '--input',
            help='The text to edit. Read from standard input if not provided.',
        ),
    ] = None,
    model: Annotated[str, typer.Option(help='The model to edit the text with.')] = DEFAULT_MODEL,
    temperature: TemperatureOption = None,
    top_p: TopPOption = None,
    n: CountOption = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Edit a text."""
    config = build_config(api_key, org_key, verbose, debug, env)
    text = text_or_stdin(input_text, '--input')
    messages = OpenAIChatAdapter().adapt_chat(edit_chat(instruction, text))
    logger.debug(f'Editing {len(text)} characters with {model}')
    with config.client() as client:
        completion = client.api.chat.completions.create(
            model=model,
            messages=messages,
            temperature=given(temperature),
            top_p=given(value_of(top_p)),
            n=given(n),
        )
    echo(completion, config.format(), _summary)
