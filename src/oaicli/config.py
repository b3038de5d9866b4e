"""Configuration options shared by every command."""

import os
import sys
from pathlib import Path
from typing import Annotated, Optional

import dotenv
import typer
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from oaicli.client import Client, Logger
from oaicli.formats import Format

API_KEY_ENV = 'OPENAI_API_KEY'
ORG_KEY_ENV = 'OPENAI_ORG_KEY'

NO_API_KEY = 'NO API KEY PROVIDED'
"""Used as the API key when a client is created without validating the config first."""

MISSING_API_KEY_MESSAGE = (
    f"Please provide an OpenAI API Key either via --api-key or the '{API_KEY_ENV}' environment "
    'variable.'
)

ApiKeyOption = Annotated[
    Optional[str],
    typer.Option(
        '--api-key',
        help=f"The OpenAI API Key. If not provided, uses the '{API_KEY_ENV}' environment variable.",
        show_default=False,
    ),
]
OrgKeyOption = Annotated[
    Optional[str],
    typer.Option(
        '--org-key',
        help=(
            'The OpenAI Organisation key. '
            f"If not provided, uses the '{ORG_KEY_ENV}' environment variable."
        ),
        show_default=False,
    ),
]
VerboseOption = Annotated[bool, typer.Option('--verbose', help='Output more details.')]
DebugOption = Annotated[bool, typer.Option('--debug', help='Output debugging information.')]
EnvOption = Annotated[
    Optional[Path],
    typer.Option(
        '--env',
        help='An optional path to a .env file.',
        dir_okay=False,
    ),
]


class Config(BaseModel):
    """Credentials and output options for a single invocation."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    org_key: str | None = None
    verbose: bool = False
    debug: bool = False
    environ: dict[str, str] = Field(default_factory=lambda: dict(os.environ), repr=False)
    """A snapshot of the environment variables credentials are read from."""

    def find_api_key(self) -> str | None:
        """Find the API key from the option, falling back to the environment."""
        return self.api_key or self.environ.get(API_KEY_ENV) or None

    def find_org_key(self) -> str | None:
        """Find the organization key from the option, falling back to the environment."""
        return self.org_key or self.environ.get(ORG_KEY_ENV) or None

    def validate_api_key(self) -> None:
        """Check that an API key can be found.

        :raises typer.BadParameter: If no API key is set.
        """
        if self.find_api_key() is None:
            raise typer.BadParameter(MISSING_API_KEY_MESSAGE, param_hint="'--api-key'")

    def format(self) -> Format:
        """The output format, given the config."""
        return Format.verbose if self.verbose else Format.default

    @property
    def log(self) -> Logger | None:
        """Prints client log lines when debugging."""
        if not self.debug:
            return None
        return typer.echo

    def client(self) -> Client:
        """Create a client from the config.

        Falls back to a placeholder API key if none is found, so requests fail with an
        authentication error. Call validate_api_key first to report a missing key instead.
        """
        return Client(
            api_key=self.find_api_key() or NO_API_KEY,
            organization=self.find_org_key(),
            log=self.log,
        )


def configure_logging(debug: bool = False) -> None:
    """Send log messages to stderr, including debug messages when debugging."""
    logger.remove()
    logger.add(sys.stderr, level='DEBUG' if debug else 'INFO', format='{message}')


def build_config(
    api_key: str | None = None,
    org_key: str | None = None,
    verbose: bool = False,
    debug: bool = False,
    env: Path | None = None,
) -> Config:
    """Create and validate the config from the shared command options.

    Variables in the .env file are loaded into the environment first, without overriding
    variables that are already set.

    :param api_key: The value of the --api-key option.
    :param org_key: The value of the --org-key option.
    :param verbose: The value of the --verbose option.
    :param debug: The value of the --debug option.
    :param env: An optional path to a .env file.
    :return: A validated config.
    """
    configure_logging(debug)
    if env is not None:
        dotenv.load_dotenv(dotenv_path=env)
    config = Config(api_key=api_key, org_key=org_key, verbose=verbose, debug=debug)
    config.validate_api_key()
    logger.debug(f'Using organization: {config.find_org_key() or "default"}')
    return config
