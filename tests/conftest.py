from unittest.mock import MagicMock

import pytest
import requests

from discourse_api.client import Client
from tests.helpers import BASE_URL, make_response


@pytest.fixture
def session():
    mock = MagicMock(spec=requests.Session)
    mock.headers = {}
    mock.request.return_value = make_response(200, {})
    return mock


@pytest.fixture
def client(session):
    return Client("secret-token", BASE_URL, session=session)
