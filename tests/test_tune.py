from unittest.mock import MagicMock

import openai
from openai.types.fine_tuning import FineTuningJob

from oaicli.tune import OpenAITuner, TuneConfig


def test_merge():
    config = TuneConfig(epochs=3, name='base')
    merged = config.merge(epochs=5, name=None, seed=7)
    assert merged.epochs == 5
    assert merged.name == 'base'
    assert merged.seed == 7
    assert config.epochs == 3


def test_read_tune_config(tmp_path):
    path = tmp_path / 'tune.json'
    path.write_text('{"epochs": 2, "batch_size": 8}', encoding='utf-8')
    config = TuneConfig.from_json(path)
    assert config.epochs == 2
    assert config.batch_size == 8
    assert config.seed is None


def test_hyperparameters():
    tuner = OpenAITuner(client=MagicMock(), model_name='m', train='file-1')
    assert tuner.hyperparameters() == {
        'n_epochs': 'auto',
        'batch_size': 'auto',
        'learning_rate_multiplier': 'auto',
    }
    tuner = OpenAITuner(
        client=MagicMock(), model_name='m', train='file-1', tune_config=TuneConfig(epochs=4)
    )
    assert tuner.hyperparameters()['n_epochs'] == 4


def test_run():
    client = MagicMock()
    job = FineTuningJob.model_construct(id='ftjob-1', model='gpt-4o-mini', status='queued')
    client.api.fine_tuning.jobs.create.return_value = job
    tuner = OpenAITuner(
        client=client,
        model_name='gpt-4o-mini',
        train='file-1',
        tune_config=TuneConfig(name='custom'),
    )
    assert tuner.run() is job
    kwargs = client.api.fine_tuning.jobs.create.call_args.kwargs
    assert kwargs['training_file'] == 'file-1'
    assert kwargs['model'] == 'gpt-4o-mini'
    assert kwargs['suffix'] == 'custom'
    assert kwargs['validation_file'] is openai.NOT_GIVEN
    assert kwargs['seed'] is openai.NOT_GIVEN
