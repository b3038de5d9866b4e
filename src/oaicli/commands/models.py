"""Commands for listing and managing models."""

from typing import Annotated

import typer
from openai.types import Model, ModelDeleted

from oaicli.config import (
    ApiKeyOption,
    DebugOption,
    EnvOption,
    OrgKeyOption,
    VerboseOption,
    build_config,
)
from oaicli.formats import echo, echo_all

app = typer.Typer(no_args_is_help=True, help='List and manage models.')

ModelArgument = Annotated[str, typer.Argument(help='The ID of a model.')]


def _summary(model: Model) -> str:
    return f'{model.id}\t{model.owned_by}'


@app.command(name='list')
def list_models(
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """List the models available to the account."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        echo_all(client.api.models.list(), config.format(), _summary)


@app.command()
def detail(
    model: ModelArgument,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Show the details of a model."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        echo(client.api.models.retrieve(model), config.format(), _summary)


@app.command()
def delete(
    model: ModelArgument,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Delete a fine-tuned model owned by the organization."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        result = client.api.models.delete(model)

    def summary(deleted: ModelDeleted) -> str:
        return f'Deleted {deleted.id}' if deleted.deleted else f'Not deleted: {deleted.id}'

    echo(result, config.format(), summary)
