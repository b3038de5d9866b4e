"""The command groups of the CLI app."""

from oaicli.commands import (
    completions,
    edits,
    embeddings,
    files,
    fine_tunes,
    models,
    moderations,
    tokens,
)

__all__ = [
    'completions',
    'edits',
    'embeddings',
    'files',
    'fine_tunes',
    'models',
    'moderations',
    'tokens',
]
