"""A module for utility functions."""

import pathlib


def project_root() -> pathlib.Path:
    """Get a path to the project root.

    :return: A directory path.
    """
    return pathlib.Path(__file__).parent.parent.parent


def shorten(text: str, width: int = 60, placeholder: str = '...') -> str:
    """Collapse a text to a single line no longer than the width.

    :param text: The text to shorten.
    :param width: The maximum length of the result.
    :param placeholder: Appended when the text is cut.
    :return: The shortened text.
    """
    line = ' '.join(text.split())
    if len(line) <= width:
        return line
    return line[: max(width - len(placeholder), 0)] + placeholder
