"""Every way a call against the Discourse API can fail besides success."""

import json

import requests
from pydantic import ValidationError


class DiscourseError(Exception):
    """Base class; ``status`` is the HTTP status involved, if any."""

    def __init__(self, message: str, *, status: int | None = None, source: BaseException | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.source = source
        if source is not None:
            self.__cause__ = source


class InvalidRequestError(DiscourseError):
    """The request was rejected locally, before anything was sent."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid Request: {message}")


class CommunicationError(DiscourseError):
    """The retry strategy gave up on the request."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(f"Communication Error: {error}", status=_response_status(error), source=error)


class RequestError(DiscourseError):
    """Transport-level failure: connection, timeout, TLS, invalid URL."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(f"Request Error: {error}", status=_response_status(error), source=error)


class SerdeError(DiscourseError):
    """A response body did not match the expected model."""

    def __init__(self, error: BaseException, status: int | None = None, body: str = "") -> None:
        super().__init__(f"Serde Error: {_first_line(error)}", status=status, source=error)
        self.body = body


class InvalidResponsePayloadError(DiscourseError):
    def __init__(self, error: BaseException, response: requests.Response) -> None:
        super().__init__(f"Invalid Response Payload: {error}", status=response.status_code, source=error)
        self.response = response


class ServerError(DiscourseError):
    """The server answered with an error status."""

    def __init__(self, body: str, status: int) -> None:
        super().__init__(f"Server Error: {status} {body}", status=status)
        self.body = body


class UnexpectedResponseError(DiscourseError):
    """A response whose status the API does not describe."""

    def __init__(self, response: requests.Response) -> None:
        super().__init__(f"Unexpected Response: {response.status_code} {response.url}", status=response.status_code)
        self.response = response


def from_exception(exc: BaseException, status: int | None = None, body: str = "") -> DiscourseError:
    """Classify an exception raised by requests or pydantic."""
    if isinstance(exc, DiscourseError):
        return exc
    if isinstance(exc, requests.exceptions.RetryError):
        return CommunicationError(exc)
    if isinstance(exc, requests.RequestException):
        return RequestError(exc)
    if isinstance(exc, (ValidationError, json.JSONDecodeError)):
        return SerdeError(exc, status=status, body=body)
    raise TypeError(f"cannot classify {type(exc).__name__}") from exc


def _response_status(error: BaseException) -> int | None:
    response = getattr(error, "response", None)
    if response is None:
        return None
    return response.status_code


def _first_line(error: BaseException) -> str:
    text = str(error).strip()
    return text.splitlines()[0] if text else type(error).__name__
