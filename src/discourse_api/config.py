"""Connection settings from a YAML file and the environment.

The YAML file (``--config`` or ``DISCOURSE_CONFIG``) is read first; the
``DISCOURSE_API_TOKEN`` and ``DISCOURSE_HOST`` environment variables
override whatever it holds.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from discourse_api.errors import InvalidRequestError

DEFAULT_BASE_URL = "https://discourse.example.com"

TOKEN_ENV = "DISCOURSE_API_TOKEN"
HOST_ENV = "DISCOURSE_HOST"
CONFIG_ENV = "DISCOURSE_CONFIG"


class Settings(BaseModel):
    token: str
    host: str = DEFAULT_BASE_URL
    timeout: float | None = None
    retries: int | None = None


def load_settings(path: Path | None = None) -> Settings:
    """Build Settings from the config file, then the environment."""
    if path is None and os.getenv(CONFIG_ENV):
        path = Path(os.environ[CONFIG_ENV])

    data = {}
    if path is not None:
        data = _read_config(path)

    if os.getenv(TOKEN_ENV):
        data["token"] = os.environ[TOKEN_ENV]
    if os.getenv(HOST_ENV):
        data["host"] = os.environ[HOST_ENV]

    if not data.get("token"):
        raise InvalidRequestError(f"no API token: set {TOKEN_ENV} or `token` in the config file")

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise InvalidRequestError(f"bad settings: {e}") from e


def _read_config(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidRequestError(f"cannot read config file {path}: {e}") from e
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidRequestError(f"config file {path} is not valid YAML: {e}") from e
    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise InvalidRequestError(f"config file {path} must hold a mapping")
    return dict(doc)
