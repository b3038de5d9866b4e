"""A CLI app for accessing OpenAI APIs."""

__version__ = '0.2.0'

from oaicli import (  # noqa: E402
    chats,
    client,
    commands,
    config,
    errors,
    files,
    formats,
    resources,
    tune,
    types,
    utils,
)

__all__ = [
    'chats',
    'client',
    'commands',
    'config',
    'errors',
    'files',
    'formats',
    'resources',
    'tune',
    'types',
    'utils',
]
