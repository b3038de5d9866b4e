"""Provides adapters that convert chats into formats for the OpenAI API."""

from oaicli.chats import adapters

__all__ = [
    'adapters',
]
