"""Commands for creating embeddings."""

from typing import Annotated, Optional

import orjson
import typer
from openai.types import CreateEmbeddingResponse

from oaicli.client import given
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

app = typer.Typer(no_args_is_help=True, help='Create embeddings of text.')

DEFAULT_MODEL = 'text-embedding-3-small'


def _summary(response: CreateEmbeddingResponse) -> str:
    # One JSON array per line, in input order.
    return '\n'.join(orjson.dumps(item.embedding).decode('utf-8') for item in response.data)


@app.command()
def create(
    input_text: Annotated[
        Optional[str],
        typer.Option(
            '--input',
            help='The text to embed. Read from standard input if not provided.',
        ),
    ] = None,
    model: Annotated[str, typer.Option(help='The model to embed the text with.')] = DEFAULT_MODEL,
    dimensions: Annotated[
        Optional[int],
        typer.Option(min=1, help='The number of dimensions of the embedding, if supported.'),
    ] = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Create an embedding of a text."""
    config = build_config(api_key, org_key, verbose, debug, env)
    text = text_or_stdin(input_text, '--input')
    with config.client() as client:
        response = client.api.embeddings.create(
            model=model,
            input=text,
            dimensions=given(dimensions),
            encoding_format='float',
        )
    echo(response, config.format(), _summary)
