"""Typed models and a thin HTTP client for the Discourse forum API."""

__version__ = "0.1.0"

from discourse_api.client import Client
from discourse_api.config import Settings, load_settings
from discourse_api.errors import (
    CommunicationError,
    DiscourseError,
    InvalidRequestError,
    InvalidResponsePayloadError,
    RequestError,
    SerdeError,
    ServerError,
    UnexpectedResponseError,
)

__all__ = [
    "Client",
    "CommunicationError",
    "DiscourseError",
    "InvalidRequestError",
    "InvalidResponsePayloadError",
    "RequestError",
    "SerdeError",
    "ServerError",
    "Settings",
    "UnexpectedResponseError",
    "load_settings",
]
