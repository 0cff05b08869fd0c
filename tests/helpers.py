import json

import requests

BASE_URL = "https://forum.example.com"


def make_response(status: int = 200, body=None, url: str = BASE_URL + "/", content_type: str = "application/json"):
    """A real requests.Response as the session would return it."""
    resp = requests.Response()
    resp.status_code = status
    if body is None:
        resp._content = b""
    elif isinstance(body, bytes):
        resp._content = body
    elif isinstance(body, str):
        resp._content = body.encode("utf-8")
    else:
        resp._content = json.dumps(body).encode("utf-8")
    resp.headers["Content-Type"] = content_type
    resp.encoding = "utf-8"
    resp.url = url
    return resp


def sent(session):
    """(method, url, kwargs) of the last request sent through the mock session."""
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs
