from openai.types.chat import ChatCompletion, ChatCompletionMessage
from openai.types.chat.chat_completion import Choice
from typer.testing import CliRunner

from oaicli.commands.edits import edit_chat
from oaicli.main import typer_app
from oaicli.resources import Role

runner = CliRunner()

COMPLETION = ChatCompletion(
    id='chatcmpl-1',
    choices=[
        Choice(
            finish_reason='stop',
            index=0,
            message=ChatCompletionMessage(role='assistant', content='The cat sat.'),
        )
    ],
    created=1,
    model='gpt-4o-mini',
    object='chat.completion',
)


def test_edit_chat():
    chat = edit_chat('Fix the spelling.', 'The cta sat.')
    assert 'Fix the spelling.' in chat.system_message
    assert len(chat.messages) == 1
    assert chat.messages[0].role == Role.user
    assert chat.messages[0].content == 'The cta sat.'


def test_create(fake_client):
    fake_client.api.chat.completions.create.return_value = COMPLETION
    result = runner.invoke(
        typer_app,
        ['edits', 'create', '--instruction', 'Fix the spelling.', '--api-key', 'abc'],
        input='The cta sat.\n',
    )
    assert result.exit_code == 0, result.output
    assert result.output == 'The cat sat.\n'
    kwargs = fake_client.api.chat.completions.create.call_args.kwargs
    assert kwargs['model'] == 'gpt-4o-mini'
    messages = kwargs['messages']
    assert [message['role'] for message in messages] == ['system', 'user']
    assert messages[1]['content'] == 'The cta sat.'


def test_create_requires_instruction(fake_client):
    result = runner.invoke(typer_app, ['edits', 'create', '--input', 'text', '--api-key', 'abc'])
    assert result.exit_code == 2
    assert not fake_client.api.mock_calls
