"""The entrypoint that creates the CLI app."""

from types import MappingProxyType
from typing import Annotated, Mapping, Optional

import typer

import oaicli
from oaicli.commands import (
    completions,
    edits,
    embeddings,
    files,
    fine_tunes,
    models,
    moderations,
    tokens,
)

COMMANDS: Mapping[str, typer.Typer] = MappingProxyType(
    {
        'models': models.app,
        'completions': completions.app,
        'edits': edits.app,
        'embeddings': embeddings.app,
        'files': files.app,
        'fine-tunes': fine_tunes.app,
        'moderations': moderations.app,
        'tokens': tokens.app,
    }
)
"""The subcommands of the app by name."""


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(oaicli.__version__)
        raise typer.Exit()


def callback(
    version: Annotated[
        Optional[bool],
        typer.Option(
            '--version',
            callback=_version_callback,
            is_eager=True,
            help='Show the version and exit.',
        ),
    ] = None,
) -> None:
    """A utility for accessing OpenAI APIs."""


def create_app() -> typer.Typer:
    """Create the CLI app with every subcommand registered."""
    app = typer.Typer(
        name='openai',
        add_completion=False,
        no_args_is_help=True,
        context_settings={'help_option_names': ['-h', '--help']},
    )
    app.callback()(callback)
    for name, command in COMMANDS.items():
        app.add_typer(command, name=name)
    return app


typer_app = create_app()


def main() -> None:
    """Run the CLI app."""
    typer_app(prog_name='openai')


if __name__ == '__main__':
    main()
