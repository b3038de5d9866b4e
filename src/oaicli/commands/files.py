"""Commands for uploading and managing files."""

from pathlib import Path
from typing import Annotated, Optional

import orjson
import typer
from loguru import logger
from openai.types import FileDeleted, FileObject

import oaicli
from oaicli.client import given
from oaicli.config import (
    ApiKeyOption,
    DebugOption,
    EnvOption,
    OrgKeyOption,
    VerboseOption,
    build_config,
)
from oaicli.errors import AppError
from oaicli.formats import Format, echo, echo_all

app = typer.Typer(no_args_is_help=True, help='Upload and manage files.')

FileArgument = Annotated[str, typer.Argument(help='The ID of a file.')]


def _summary(file: FileObject) -> str:
    return f'{file.id}\t{file.filename}\t{file.purpose}\t{file.bytes} bytes'


def count_jsonl(path: Path) -> int:
    """Count the records in a JSONL file.

    :param path: Path to a JSONL file.
    :return: The number of records.
    :raises AppError: If a line is not valid JSON.
    """
    try:
        return sum(1 for _ in oaicli.files.yield_jsonl(path))
    except orjson.JSONDecodeError as e:
        raise AppError(f'Not a valid JSONL file: {path}: {e}') from e


@app.command(name='list')
def list_files(
    purpose: Annotated[
        Optional[str], typer.Option(help='Only list files with this purpose.')
    ] = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """List uploaded files."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        echo_all(client.api.files.list(purpose=given(purpose)), config.format(), _summary)


@app.command()
def upload(
    path: Annotated[
        Path,
        typer.Argument(help='The file to upload.', exists=True, dir_okay=False, readable=True),
    ],
    purpose: Annotated[str, typer.Option(help='What the file will be used for.')] = 'fine-tune',
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Upload a file.

    Files uploaded for fine-tuning must be JSONL files and are checked before uploading.
    """
    config = build_config(api_key, org_key, verbose, debug, env)
    if purpose == 'fine-tune':
        logger.debug(f'{path} has {count_jsonl(path)} records')
    if config.format() == Format.verbose:
        logger.info(f'MD5 checksum of {path}: {oaicli.files.md5sum(path)}')
    with config.client() as client, open(path, 'rb') as file:
        result = client.api.files.create(file=file, purpose=purpose)
    logger.info(f'Uploaded {path}')
    echo(result, config.format(), _summary)


@app.command()
def detail(
    file_id: FileArgument,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Show the details of a file."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        echo(client.api.files.retrieve(file_id), config.format(), _summary)


@app.command()
def delete(
    file_id: FileArgument,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Delete a file."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        result = client.api.files.delete(file_id)

    def summary(deleted: FileDeleted) -> str:
        return f'Deleted {deleted.id}' if deleted.deleted else f'Not deleted: {deleted.id}'

    echo(result, config.format(), summary)


@app.command()
def content(
    file_id: FileArgument,
    output: Annotated[
        Optional[Path],
        typer.Option(help='Save the content to this file instead of printing it.', dir_okay=False),
    ] = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Download the content of a file."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        response = client.api.files.content(file_id)
        if output is None:
            typer.echo(response.text, nl=False)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(response.content)
            logger.info(f'Saved {file_id} to {output}')
