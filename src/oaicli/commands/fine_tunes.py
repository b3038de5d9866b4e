"""Commands for creating and managing fine-tuning jobs."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from openai.types.fine_tuning import FineTuningJob, FineTuningJobEvent

from oaicli.chats.adapters import OpenAIChatAdapter
from oaicli.client import given
from oaicli.config import (
    ApiKeyOption,
    DebugOption,
    EnvOption,
    OrgKeyOption,
    VerboseOption,
    build_config,
)
from oaicli.formats import echo, echo_all
from oaicli.tune import OpenAITuner, TuneConfig
from oaicli.utils import shorten

app = typer.Typer(no_args_is_help=True, help='Create and manage fine-tuning jobs.')

JobArgument = Annotated[str, typer.Argument(help='The ID of a fine-tuning job.')]
LimitOption = Annotated[
    Optional[int], typer.Option(min=1, help='The maximum number of items to list.')
]


def _summary(job: FineTuningJob) -> str:
    name = job.fine_tuned_model or '-'
    return f'{job.id}\t{job.model}\t{job.status}\t{name}'


def _event_summary(event: FineTuningJobEvent) -> str:
    return f'{event.created_at}\t{event.level}\t{shorten(event.message, width=100)}'


@app.command()
def create(
    training_file: Annotated[
        str, typer.Option(help='The ID of an uploaded file with training data.')
    ],
    model: Annotated[str, typer.Option(help='The base model to tune.')],
    validation_file: Annotated[
        Optional[str], typer.Option(help='The ID of an uploaded file with validation data.')
    ] = None,
    suffix: Annotated[
        Optional[str], typer.Option(help='A suffix to add to the name of the tuned model.')
    ] = None,
    epochs: Annotated[Optional[int], typer.Option(min=1, help='The number of epochs.')] = None,
    batch_size: Annotated[
        Optional[int], typer.Option(min=1, help='The training batch size.')
    ] = None,
    seed: Annotated[Optional[int], typer.Option(help='The random seed.')] = None,
    tune_config_path: Annotated[
        Optional[Path],
        typer.Option(
            '--tune-config',
            help='An optional path to a JSON tuning configuration. Options take precedence.',
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Create a fine-tuning job."""
    config = build_config(api_key, org_key, verbose, debug, env)
    tune_config = TuneConfig.from_json(tune_config_path) if tune_config_path else TuneConfig()
    tune_config = tune_config.merge(name=suffix, epochs=epochs, batch_size=batch_size, seed=seed)
    with config.client() as client:
        tuner = OpenAITuner(
            client=client,
            model_name=model,
            train=training_file,
            validation=validation_file,
            tune_config=tune_config,
        )
        job = tuner.run()
    echo(job, config.format(), _summary)


@app.command(name='list')
def list_jobs(
    limit: LimitOption = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """List fine-tuning jobs, most recent first."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        page = client.api.fine_tuning.jobs.list(limit=given(limit))
        jobs = page.data if limit else page
        echo_all(jobs, config.format(), _summary)


@app.command()
def detail(
    job_id: JobArgument,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Show the details of a fine-tuning job."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        echo(client.api.fine_tuning.jobs.retrieve(job_id), config.format(), _summary)


@app.command()
def cancel(
    job_id: JobArgument,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Cancel a running fine-tuning job."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        job = client.api.fine_tuning.jobs.cancel(job_id)
    logger.info(f'Cancelled tuning job: {job.id}')
    echo(job, config.format(), _summary)


@app.command()
def events(
    job_id: JobArgument,
    limit: LimitOption = None,
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """List the events of a fine-tuning job, most recent first."""
    config = build_config(api_key, org_key, verbose, debug, env)
    with config.client() as client:
        page = client.api.fine_tuning.jobs.list_events(job_id, limit=given(limit))
        echo_all(page.data if limit else page, config.format(), _event_summary)


@app.command()
def prepare(
    input_path: Annotated[
        Path,
        typer.Option(
            '--input',
            help='The path to a chat JSONL file.',
            exists=True,
            dir_okay=False,
        ),
    ],
    output_path: Annotated[
        Path,
        typer.Option(
            '--output',
            help='The file path to save the training data to.',
            dir_okay=False,
        ),
    ],
    api_key: ApiKeyOption = None,
    org_key: OrgKeyOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
    env: EnvOption = None,
) -> None:
    """Convert chats into training data for fine-tuning chat models.

    Each line of the input is a chat with an optional system message and a list of messages.
    Each line of the output is a training example in the format expected by the API.
    """
    build_config(api_key, org_key, verbose, debug, env)
    count = OpenAIChatAdapter().adapt_file_tune(input_path, output_path)
    logger.info(f'Wrote {count} training examples to {output_path}')
