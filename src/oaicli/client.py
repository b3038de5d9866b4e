"""A client handle for the OpenAI API."""

from types import TracebackType
from typing import Any, Callable, Self

import httpx
import openai
from loguru import logger

from oaicli.errors import AppError

type Logger = Callable[[str], None]


def given[T](value: T | None) -> T | openai.NotGiven:
    """Map an unset option to the client's "not given" marker so it is left out of requests."""
    return openai.NOT_GIVEN if value is None else value


class Client:
    """Wraps an OpenAI client with the credentials and logger it was created with.

    The client is a context manager. Leaving the context closes the underlying HTTP client,
    and API errors raised inside the context are reported as an AppError.
    """

    def __init__(
        self,
        api_key: str,
        organization: str | None = None,
        log: Logger | None = None,
    ) -> None:
        """Create a new client.

        :param api_key: An API key to authenticate requests with.
        :param organization: An optional organization to scope requests to.
        :param log: Receives a line for every HTTP request and response when set.
        """
        self.api_key = api_key
        self.organization = organization
        self.log = log
        http_client: httpx.Client | None = None
        if log is not None:
            http_client = openai.DefaultHttpxClient(
                event_hooks={
                    'request': [self._log_request],
                    'response': [self._log_response],
                }
            )
        self.api = openai.OpenAI(
            api_key=api_key,
            organization=organization,
            http_client=http_client,
        )

    def _log_request(self, request: httpx.Request) -> None:
        if self.log is not None:
            self.log(f'{request.method} {request.url}')

    def _log_response(self, response: httpx.Response) -> None:
        if self.log is not None:
            request = response.request
            self.log(f'{response.status_code} {request.method} {request.url}')

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.api.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> Any:
        self.close()
        if isinstance(exc, openai.APIError):
            logger.debug(f'Request failed: {exc!r}')
            raise AppError(describe_error(exc)) from exc


def describe_error(error: openai.APIError) -> str:
    """Describe an API error for the user.

    :param error: An error raised by the OpenAI client.
    :return: A human-readable description.
    """
    if isinstance(error, openai.APIStatusError):
        return f'The API responded with status {error.status_code}: {error.message}'
    if isinstance(error, openai.APIConnectionError):
        return f'Could not connect to the API: {error.message}'
    return error.message
