"""A package for tuning OpenAI models."""

from typing import Self

from loguru import logger
from openai.types.fine_tuning import FineTuningJob
from openai.types.fine_tuning.job_create_params import Hyperparameters

from oaicli.client import Client, given
from oaicli.resources import JsonModel


class TuneConfig(JsonModel):
    """Configuration options for tuning models."""

    epochs: int | None = None
    """The number of epochs to train for."""

    batch_size: int | None = None
    """The training batch size."""

    learning_rate_multiplier: float | None = None
    """Scales the learning rate used for training."""

    name: str | None = None
    """A suffix to add to the name of the tuned model."""

    seed: int | None = None
    """The random seed for reproducibility."""

    def merge(self, **overrides: object) -> Self:
        """Create a copy with the overrides that are not None applied.

        :param overrides: Field values to override.
        :return: A new config.
        """
        update = {key: value for key, value in overrides.items() if value is not None}
        return self.model_copy(update=update)


class OpenAITuner:
    """Creates tuning jobs for OpenAI models."""

    def __init__(
        self,
        client: Client,
        model_name: str,
        train: str,
        validation: str | None = None,
        tune_config: TuneConfig | None = None,
    ):
        """Create a new tuner.

        :param client: The client to use for API calls.
        :param model_name: The name of the model to tune.
        :param train: An OpenAI file ID of a training dataset.
        :param validation: An OpenAI file ID of a validation dataset.
        :param tune_config: Configures fine-tuning.
        """
        self.client = client
        self.model_name = model_name
        self.train = train
        self.validation = validation
        self.tune_config = tune_config or TuneConfig()

    def hyperparameters(self) -> Hyperparameters:
        """Hyperparameters for the job, leaving unset values to the API."""
        return Hyperparameters(
            n_epochs=self.tune_config.epochs or 'auto',
            batch_size=self.tune_config.batch_size or 'auto',
            learning_rate_multiplier=self.tune_config.learning_rate_multiplier or 'auto',
        )

    def run(self) -> FineTuningJob:
        """Create the tuning job.

        :return: The created job.
        """
        job = self.client.api.fine_tuning.jobs.create(
            training_file=self.train,
            validation_file=given(self.validation),
            model=self.model_name,
            seed=given(self.tune_config.seed),
            suffix=given(self.tune_config.name),
            hyperparameters=self.hyperparameters(),
        )
        logger.info(f'Created tuning job: {job.id}')
        return job
