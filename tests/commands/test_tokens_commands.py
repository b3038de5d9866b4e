import pytest
from typer.testing import CliRunner

from oaicli.commands import tokens
from oaicli.errors import AppError
from oaicli.main import typer_app

runner = CliRunner()


class FakeEncoding:
    """Encodes each character as its code point."""

    name = 'fake'

    def encode(self, text, disallowed_special=()):
        return [ord(character) for character in text]

    def decode(self, tokens):
        return ''.join(chr(token) for token in tokens)

    def decode_single_token_bytes(self, token):
        return chr(token).encode('utf-8')


@pytest.fixture
def encoding(monkeypatch):
    calls = []

    def find_encoding(model=None, encoding=None):
        calls.append((model, encoding))
        return FakeEncoding()

    monkeypatch.setattr(tokens, 'find_encoding', find_encoding)
    return calls


def test_encode(encoding):
    result = runner.invoke(
        typer_app, ['tokens', 'encode', '--text', 'hi', '--model', 'gpt-4o', '--api-key', 'abc']
    )
    assert result.exit_code == 0, result.output
    assert result.output == '104 105\n'
    assert encoding == [('gpt-4o', None)]


def test_decode(encoding):
    result = runner.invoke(typer_app, ['tokens', 'decode', '104', '105', '--api-key', 'abc'])
    assert result.exit_code == 0, result.output
    assert result.output == 'hi\n'


def test_count_from_stdin(encoding):
    result = runner.invoke(typer_app, ['tokens', 'count', '--api-key', 'abc'], input='ab\ncd\n')
    assert result.exit_code == 0, result.output
    assert result.output == '5\n'


def test_tokens_require_api_key(encoding):
    result = runner.invoke(typer_app, ['tokens', 'count', '--text', 'hi'])
    assert result.exit_code == 2


def test_find_encoding_unknown():
    with pytest.raises(AppError):
        tokens.find_encoding(encoding='no-such-encoding')
    with pytest.raises(AppError):
        tokens.find_encoding(model='no-such-model')
