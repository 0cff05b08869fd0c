"""HTTP client for the Discourse API.

A Client owns one ``requests.Session`` carrying the bearer token and user
agent. Resource namespaces (``client.topics()``, ``client.users()`` ...)
share it and go through ``Client.call``, which builds the request, sends
it and turns the reply into a model or a classified error.
"""

import json
import logging
import os
from typing import Any
from urllib.parse import quote

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from discourse_api import __version__
from discourse_api.config import DEFAULT_BASE_URL, HOST_ENV, TOKEN_ENV, Settings
from discourse_api.errors import (
    CommunicationError,
    DiscourseError,
    InvalidRequestError,
    InvalidResponsePayloadError,
    SerdeError,
    ServerError,
    UnexpectedResponseError,
    from_exception,
)
from discourse_api.resources import (
    Backups,
    Badges,
    Categories,
    DiscourseCalendarEvents,
    Groups,
    Invites,
    Notifications,
    Posts,
    PrivateMessages,
    Search,
    Site,
    Tags,
    Topics,
    Uploads,
    Users,
)
from discourse_api.types.base import DiscourseModel, QueryParams, query_value

logger = logging.getLogger(__name__)

USER_AGENT = f"discourse-api.py/{__version__}"

# (connect, read) seconds; uploads and backups can be slow
DEFAULT_TIMEOUT = (60, 600)

RETRY_STATUSES = (408, 429, 500, 502, 503, 504)


class Client:
    """Entry point for talking to one Discourse site."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float | tuple[float, float] | None = DEFAULT_TIMEOUT,
        retry: int | Retry | None = None,
        session: requests.Session | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry = _build_retry(retry)
        self.session = session if session is not None else requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT
        self.session.headers["Accept"] = "application/json"
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"
        if self.retry is not None:
            adapter = HTTPAdapter(max_retries=self.retry)
            self.session.mount("https://", adapter)
            self.session.mount("http://", adapter)

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r})"

    @classmethod
    def from_env(cls, **kwargs) -> "Client":
        """Build a client from DISCOURSE_API_TOKEN and DISCOURSE_HOST."""
        token = os.getenv(TOKEN_ENV)
        if not token:
            raise InvalidRequestError(f"{TOKEN_ENV} is not set")
        return cls(token, os.getenv(HOST_ENV) or DEFAULT_BASE_URL, **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "Client":
        if settings.timeout is not None:
            kwargs.setdefault("timeout", (DEFAULT_TIMEOUT[0], settings.timeout))
        if settings.retries is not None:
            kwargs.setdefault("retry", settings.retries)
        return cls(settings.token, settings.host, **kwargs)

    def set_base_url(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def request_raw(self, method: str, uri: str, body: Any = None) -> requests.Response:
        """Send an arbitrary request and return the response untouched.

        ``uri`` may be absolute or relative to the base URL. ``body`` may be
        a model, a str or bytes payload, or anything ``json.dumps`` accepts.
        """
        if uri.startswith(("http://", "https://")):
            url = uri
        else:
            url = f"{self.base_url}/{uri.lstrip('/')}"

        if body is None or isinstance(body, (str, bytes)):
            data = body
        elif isinstance(body, BaseModel):
            data = body.model_dump_json(by_alias=True, exclude_none=True)
        else:
            data = json.dumps(body)

        logger.debug("%s %s (raw)", method, url)
        return self._send(
            method,
            url,
            data=data,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )

    def call(
        self,
        method: str,
        path: str,
        *,
        path_params: dict[str, Any] | None = None,
        query: QueryParams | dict[str, Any] | None = None,
        body: Any = None,
        body_model: type[DiscourseModel] | None = None,
        files: list[tuple[str, tuple]] | None = None,
        response_model: type[DiscourseModel] | None = None,
        many: bool = False,
        text: bool = False,
    ):
        """Send one API call and decode the reply.

        Returns an instance of ``response_model`` (a list of them when
        ``many``), the raw body when ``text``, or None when there is no
        response model. Raises a DiscourseError subclass on any failure.
        """
        url = f"{self.base_url}/{_expand_path(path, path_params or {})}"
        kwargs = {"params": _build_query(query), "timeout": self.timeout, "stream": True}

        payload = None
        if body is not None:
            payload = _dump_body(body, body_model)
        if files is not None:
            if payload is not None:
                files = [("body", ("body.json", json.dumps(payload), "application/json"))] + files
            kwargs["files"] = files
        elif payload is not None:
            kwargs["json"] = payload

        response = self._send(method, url, **kwargs)
        logger.debug("%s %s -> %s", method, url, response.status_code)

        try:
            content = response.content
        except requests.RequestException as e:
            raise self._fail(method, url, InvalidResponsePayloadError(e, response))

        status = response.status_code
        if status >= 400:
            raise self._fail(method, url, ServerError(response.text, status))
        if not 200 <= status < 300:
            raise self._fail(method, url, UnexpectedResponseError(response))

        if text:
            return response.text
        if response_model is None:
            return None
        try:
            if many:
                return TypeAdapter(list[response_model]).validate_json(content)
            return response_model.model_validate_json(content)
        except ValidationError as e:
            raise self._fail(method, url, SerdeError(e, status=status, body=response.text))

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            return self.session.request(method, url, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            if self.retry is not None:
                raise self._fail(method, url, CommunicationError(e))
            raise self._fail(method, url, from_exception(e))
        except requests.RequestException as e:
            raise self._fail(method, url, from_exception(e))

    def _fail(self, method: str, url: str, error: DiscourseError) -> DiscourseError:
        logger.warning("%s %s failed: %s", method, url, error)
        return error

    def backups(self) -> Backups:
        return Backups(self)

    def badges(self) -> Badges:
        return Badges(self)

    def categories(self) -> Categories:
        return Categories(self)

    def discourse_calendar_events(self) -> DiscourseCalendarEvents:
        return DiscourseCalendarEvents(self)

    def groups(self) -> Groups:
        return Groups(self)

    def invites(self) -> Invites:
        return Invites(self)

    def notifications(self) -> Notifications:
        return Notifications(self)

    def posts(self) -> Posts:
        return Posts(self)

    def private_messages(self) -> PrivateMessages:
        return PrivateMessages(self)

    def search(self) -> Search:
        return Search(self)

    def site(self) -> Site:
        return Site(self)

    def tags(self) -> Tags:
        return Tags(self)

    def topics(self) -> Topics:
        return Topics(self)

    def uploads(self) -> Uploads:
        return Uploads(self)

    def users(self) -> Users:
        return Users(self)


def _build_retry(retry: int | Retry | None) -> Retry | None:
    if retry is None or isinstance(retry, Retry):
        return retry
    if isinstance(retry, bool) or not isinstance(retry, int) or retry < 0:
        raise InvalidRequestError(f"retry must be a non-negative int or a urllib3 Retry, got {retry!r}")
    return Retry(
        total=retry,
        backoff_factor=0.5,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=Retry.DEFAULT_ALLOWED_METHODS,
    )


def _expand_path(path: str, params: dict[str, Any]) -> str:
    quoted = {}
    for name, value in params.items():
        if value is None or str(value) == "":
            raise InvalidRequestError(f"path parameter `{name}` must not be empty")
        quoted[name] = quote(str(value), safe="")
    return path.format(**quoted)


def _build_query(query: QueryParams | dict[str, Any] | None) -> list[tuple[str, str]] | None:
    if query is None:
        return None
    if isinstance(query, QueryParams):
        pairs = query.to_query()
    else:
        pairs = [(name, query_value(value)) for name, value in query.items() if value is not None]
    return pairs or None


def _dump_body(body: Any, body_model: type[DiscourseModel] | None) -> dict[str, Any]:
    if isinstance(body, DiscourseModel):
        if body_model is not None and not isinstance(body, body_model):
            raise InvalidRequestError(f"expected {body_model.__name__}, got {type(body).__name__}")
        return body.to_dict()
    if isinstance(body, dict):
        if body_model is None:
            return body
        try:
            return body_model.model_validate(body).to_dict()
        except ValidationError as e:
            raise InvalidRequestError(f"{body_model.__name__}: {e}") from e
    raise InvalidRequestError(f"request body must be a model or a dict, got {type(body).__name__}")
