"""Commands for tokenizing text locally."""

from typing import Annotated, Optional

import tiktoken
import typer
from loguru import logger

from oaicli.config import (
    ApiKeyOption,
    DebugOption,
    EnvOption,
    OrgKeyOption,
    VerboseOption,
    build_config,
)
from oaicli.errors import AppError
from oaicli.files import text_or_stdin

app = typer.Typer(no_args_is_help=True, help='Encode, decode and count tokens.')

DEFAULT_ENCODING = 'o200k_base'

ModelOption = Annotated[
    Optional[str],
    typer.Option(help='Use the encoding of this model.'),
]
EncodingOption = Annotated[
    Optional[str],
    typer.Option(help=f'The name of the encoding to use. Defaults to {DEFAULT_ENCODING}.'),
]
TextOption = Annotated[
    Optional[str],
    typer.Option(help='The text to tokenize. Read from standard input if not provided.'),
]


def find_encoding(model: str | None = None, encoding: str | None = None) -> tiktoken.Encoding:
    """Find a tokenizer encoding.

    An encoding name takes precedence over a model name.

    :param model: The name of a model.
    :param encoding: The name of an encoding.
    :return: The encoding.
    :raises AppError: If the model or encoding is not known.
    """
    try:
        if encoding is None and model is not None:
            return tiktoken.encoding_for_model(model)
        return tiktoken.get_encoding(encoding or DEFAULT_ENCODING)
    except (KeyError, ValueError) as e:
        raise AppError(f'Unknown model or encoding: {model or encoding}') from e


@app.command()
def encode(
    text: TextOption = None,
    model: ModelOption = None,
    encoding: EncodingOption = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Print the tokens of a text, separated by spaces."""
    config = build_config(api_key, org_key, verbose, debug, env)
    tokenizer = find_encoding(model, encoding)
    tokens = tokenizer.encode(text_or_stdin(text, '--text'), disallowed_special=())
    if config.verbose:
        for token in tokens:
            typer.echo(f'{token}\t{tokenizer.decode_single_token_bytes(token)!r}')
    else:
        typer.echo(' '.join(str(token) for token in tokens))


@app.command()
def decode(
    tokens: Annotated[list[int], typer.Argument(help='The tokens to decode.')],
    model: ModelOption = None,
    encoding: EncodingOption = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Print the text of a sequence of tokens."""
    build_config(api_key, org_key, verbose, debug, env)
    tokenizer = find_encoding(model, encoding)
    try:
        typer.echo(tokenizer.decode(tokens))
    except (KeyError, ValueError) as e:
        raise AppError(f'Could not decode tokens with {tokenizer.name}: {e}') from e


@app.command()
def count(
    text: TextOption = None,
    model: ModelOption = None,
    encoding: EncodingOption = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Print the number of tokens in a text."""
    build_config(api_key, org_key, verbose, debug, env)
    tokenizer = find_encoding(model, encoding)
    logger.debug(f'Counting tokens with {tokenizer.name}')
    tokens = tokenizer.encode(text_or_stdin(text, '--text'), disallowed_special=())
    typer.echo(len(tokens))
