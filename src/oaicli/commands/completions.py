"""Commands for completing prompts with legacy completion models."""

from typing import Annotated, Optional

import typer
from loguru import logger
from openai.types import Completion

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
from oaicli.types import Penalty, Percentage, parse_penalty, parse_percentage, value_of

app = typer.Typer(no_args_is_help=True, help='Complete text prompts.')

DEFAULT_MODEL = 'gpt-3.5-turbo-instruct'

TemperatureOption = Annotated[
    Optional[float],
    typer.Option(min=0.0, max=2.0, help='The sampling temperature, between 0 and 2.'),
]
TopPOption = Annotated[
    Optional[Percentage],
    typer.Option(
        '--top-p',
        parser=parse_percentage,
        metavar='PERCENTAGE',
        help='The probability mass of tokens to sample from, between 0 and 1.',
    ),
]
PresencePenaltyOption = Annotated[
    Optional[Penalty],
    typer.Option(
        parser=parse_penalty,
        metavar='PENALTY',
        help='Penalizes tokens that already appear in the text, between -2 and 2.',
    ),
]
FrequencyPenaltyOption = Annotated[
    Optional[Penalty],
    typer.Option(
        parser=parse_penalty,
        metavar='PENALTY',
        help='Penalizes tokens by how often they appear in the text, between -2 and 2.',
    ),
]
CountOption = Annotated[
    Optional[int], typer.Option('--n', min=1, help='How many choices to generate.')
]


def _summary(completion: Completion) -> str:
    return '\n'.join(choice.text for choice in completion.choices)


@app.command()
def create(
    prompt: Annotated[
        Optional[str],
        typer.Option(help='The prompt to complete. Read from standard input if not provided.'),
    ] = None,
    model: Annotated[
        str, typer.Option(help='The model to complete the prompt with.')
    ] = DEFAULT_MODEL,
    suffix: Annotated[
        Optional[str], typer.Option(help='Text that comes after the completion.')
    ] = None,
    max_tokens: Annotated[
        Optional[int], typer.Option(min=1, help='The maximum number of tokens to generate.')
    ] = None,
    temperature: TemperatureOption = None,
    top_p: TopPOption = None,
    n: CountOption = None,
    stop: Annotated[
        Optional[list[str]],
        typer.Option(help='A sequence where generation stops. Can be repeated up to 4 times.'),
    ] = None,
    presence_penalty: PresencePenaltyOption = None,
    frequency_penalty: FrequencyPenaltyOption = None,
    echo_prompt: Annotated[
        bool, typer.Option('--echo', help='Include the prompt in the completion.')
    ] = False,
    best_of: Annotated[
        Optional[int],
        typer.Option(min=1, help='Generate this many choices on the server and return the best.'),
    ] = None,
    user: Annotated[
        Optional[str], typer.Option(help='An identifier for the end-user making the request.')
    ] = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Complete a prompt."""
    config = build_config(api_key, org_key, verbose, debug, env)
    prompt = text_or_stdin(prompt, '--prompt')
    logger.debug(f'Completing a prompt of {len(prompt)} characters with {model}')
    with config.client() as client:
        completion = client.api.completions.create(
            model=model,
            prompt=prompt,
            suffix=given(suffix),
            max_tokens=given(max_tokens),
            temperature=given(temperature),
            top_p=given(value_of(top_p)),
            n=given(n),
            stop=given(stop or None),
            presence_penalty=given(value_of(presence_penalty)),
            frequency_penalty=given(value_of(frequency_penalty)),
            echo=echo_prompt,
            best_of=given(best_of),
            user=given(user),
        )
    echo(completion, config.format(), _summary)
