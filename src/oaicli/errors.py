"""Errors reported to the user by the CLI app."""

import click


class AppError(click.ClickException):
    """A failure with a human-readable description.

    Click prints the description to stderr and exits with status 1.
    """

    exit_code = 1

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description

    def __str__(self) -> str:
        return self.description
