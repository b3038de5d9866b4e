import orjson
from openai.types import CreateEmbeddingResponse, Embedding
from openai.types.create_embedding_response import Usage
from typer.testing import CliRunner

from oaicli.main import typer_app

runner = CliRunner()

RESPONSE = CreateEmbeddingResponse(
    data=[Embedding(embedding=[0.25, -0.5, 1.0], index=0, object='embedding')],
    model='text-embedding-3-small',
    object='list',
    usage=Usage(prompt_tokens=2, total_tokens=2),
)


def test_create(fake_client):
    fake_client.api.embeddings.create.return_value = RESPONSE
    result = runner.invoke(
        typer_app,
        ['embeddings', 'create', '--input', 'hello world', '--dimensions', '3', '--api-key', 'abc'],
    )
    assert result.exit_code == 0, result.output
    assert orjson.loads(result.output) == [0.25, -0.5, 1.0]
    kwargs = fake_client.api.embeddings.create.call_args.kwargs
    assert kwargs['input'] == 'hello world'
    assert kwargs['dimensions'] == 3


def test_create_verbose(fake_client):
    fake_client.api.embeddings.create.return_value = RESPONSE
    result = runner.invoke(
        typer_app,
        ['embeddings', 'create', '--api-key', 'abc', '--verbose'],
        input='hello world',
    )
    assert result.exit_code == 0, result.output
    assert orjson.loads(result.output)['usage']['total_tokens'] == 2
