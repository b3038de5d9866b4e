import orjson
import pytest

import oaicli
from oaicli.chats.adapters import OpenAIChatAdapter
from oaicli.errors import AppError
from oaicli.resources import Chat, Message, Role


def test_adapt_messages():
    chat_adapter = OpenAIChatAdapter()
    messages = [
        Message(role=Role.user, content='message 1'),
        Message(role=Role.assistant, content='message 2'),
    ]
    results = chat_adapter.adapt_messages(messages)
    assert len(results) == 2
    assert results[0]['role'] == 'user'
    assert results[0]['content'] == 'message 1'

    assert results[1]['role'] == 'assistant'
    assert results[1]['content'] == 'message 2'


def test_adapt_chat_puts_system_message_first():
    chat = Chat(
        system_message='Be brief.',
        messages=[Message(role=Role.user, content='Hello')],
    )
    results = OpenAIChatAdapter().adapt_chat(chat)
    assert [result['role'] for result in results] == ['system', 'user']
    assert results[0]['content'] == 'Be brief.'


def test_adapt_file_tune(tmp_path):
    input_path = oaicli.utils.project_root() / 'test-data/test_chats/chats.jsonl'
    output_path = tmp_path / 'tune.jsonl'
    count = OpenAIChatAdapter().adapt_file_tune(input_path, output_path)
    assert count == 2

    examples = list(oaicli.files.yield_jsonl(output_path))
    assert len(examples) == 2
    assert [m['role'] for m in examples[0]['messages']] == ['system', 'user', 'assistant']
    assert [m['role'] for m in examples[1]['messages']] == ['user', 'assistant']
    assert examples[1]['messages'][1]['content'] == 'Paris.'


def test_adapt_file_tune_rejects_empty_chats(tmp_path):
    input_path = tmp_path / 'chats.jsonl'
    input_path.write_bytes(orjson.dumps({'key': 'empty', 'messages': []}) + b'\n')
    with pytest.raises(AppError) as e:
        OpenAIChatAdapter().adapt_file_tune(input_path, tmp_path / 'tune.jsonl')
    assert 'index 0' in e.value.description


def test_adapt_file_tune_rejects_invalid_chats(tmp_path):
    input_path = tmp_path / 'chats.jsonl'
    input_path.write_text('{"messages": [{"role": "robot", "content": "beep"}]}\n')
    with pytest.raises(AppError):
        OpenAIChatAdapter().adapt_file_tune(input_path, tmp_path / 'tune.jsonl')


def test_adapt_file_tune_keeps_output_on_failure(tmp_path):
    input_path = tmp_path / 'chats.jsonl'
    valid = Chat(
        messages=[
            Message(role=Role.user, content='Hi'),
            Message(role=Role.assistant, content='Hello'),
        ]
    )
    input_path.write_text(
        valid.model_dump_json() + '\n' + '{"messages": [{"role": "robot", "content": "beep"}]}\n',
        encoding='utf-8',
    )
    output_path = tmp_path / 'tune.jsonl'
    with pytest.raises(AppError):
        OpenAIChatAdapter().adapt_file_tune(input_path, output_path)
    assert not output_path.exists()

    output_path.write_text('{"messages": []}\n', encoding='utf-8')
    with pytest.raises(AppError):
        OpenAIChatAdapter().adapt_file_tune(input_path, output_path)
    assert output_path.read_text(encoding='utf-8') == '{"messages": []}\n'
    assert sorted(tmp_path.iterdir()) == sorted([input_path, output_path])
