"""Commands for classifying whether text is harmful."""

from typing import Annotated, Optional

import typer
from openai.types import ModerationCreateResponse

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

app = typer.Typer(no_args_is_help=True, help='Check text with the moderation models.')

DEFAULT_MODEL = 'omni-moderation-latest'


def _summary(response: ModerationCreateResponse) -> str:
    lines: list[str] = []
    for result in response.results:
        lines.append(f'flagged: {str(result.flagged).lower()}')
        categories = result.categories.model_dump(by_alias=True)
        flagged = sorted(name for name, value in categories.items() if value)
        if flagged:
            lines.append(f'categories: {", ".join(flagged)}')
    return '\n'.join(lines)


@app.command()
def create(
    input_text: Annotated[
        Optional[str],
        typer.Option(
            '--input',
            help='The text to classify. Read from standard input if not provided.',
        ),
    ] = None,
    model: Annotated[str, typer.Option(help='The moderation model to use.')] = DEFAULT_MODEL,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Classify a text."""
    config = build_config(api_key, org_key, verbose, debug, env)
    text = text_or_stdin(input_text, '--input')
    with config.client() as client:
        response = client.api.moderations.create(model=model, input=text)
    echo(response, config.format(), _summary)
