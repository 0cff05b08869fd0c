import json

import pytest
import requests
from pydantic import ValidationError

from discourse_api.errors import (
    CommunicationError,
    DiscourseError,
    InvalidRequestError,
    InvalidResponsePayloadError,
    RequestError,
    SerdeError,
    ServerError,
    UnexpectedResponseError,
    from_exception,
)
from discourse_api.types.backups import CreateBackupResponse

from tests.helpers import make_response


def _validation_error() -> ValidationError:
    try:
        CreateBackupResponse.model_validate({})
    except ValidationError as e:
        return e
    raise AssertionError("expected a validation error")


class TestErrorStatus:
    def test_invalid_request_has_no_status(self):
        err = InvalidRequestError("id must not be empty")
        assert err.status is None
        assert str(err) == "Invalid Request: id must not be empty"

    def test_server_error(self):
        err = ServerError("not found", 404)
        assert err.status == 404
        assert err.body == "not found"
        assert str(err) == "Server Error: 404 not found"

    def test_serde_error_keeps_status_and_body(self):
        cause = _validation_error()
        err = SerdeError(cause, status=200, body="{}")
        assert err.status == 200
        assert err.body == "{}"
        assert err.source is cause
        assert err.__cause__ is cause
        assert str(err).startswith("Serde Error: ")

    def test_unexpected_response(self):
        resp = make_response(302, url="https://forum.example.com/t/1.json")
        err = UnexpectedResponseError(resp)
        assert err.status == 302
        assert str(err) == "Unexpected Response: 302 https://forum.example.com/t/1.json"

    def test_invalid_response_payload(self):
        resp = make_response(200)
        cause = requests.exceptions.ChunkedEncodingError("connection broken")
        err = InvalidResponsePayloadError(cause, resp)
        assert err.status == 200
        assert err.response is resp
        assert err.__cause__ is cause

    def test_request_error_without_response(self):
        err = RequestError(requests.ConnectionError("refused"))
        assert err.status is None
        assert str(err) == "Request Error: refused"

    def test_request_error_with_response(self):
        cause = requests.HTTPError("boom", response=make_response(503))
        assert RequestError(cause).status == 503

    def test_communication_error(self):
        err = CommunicationError(requests.exceptions.RetryError("too many retries"))
        assert err.status is None
        assert str(err) == "Communication Error: too many retries"

    def test_all_are_discourse_errors(self):
        for cls in (InvalidRequestError, CommunicationError, RequestError, SerdeError,
                    InvalidResponsePayloadError, ServerError, UnexpectedResponseError):
            assert issubclass(cls, DiscourseError)


class TestFromException:
    def test_retry_error_is_communication_error(self):
        assert isinstance(from_exception(requests.exceptions.RetryError("x")), CommunicationError)

    def test_transport_error_is_request_error(self):
        assert isinstance(from_exception(requests.Timeout("slow")), RequestError)

    def test_validation_error_is_serde_error(self):
        err = from_exception(_validation_error(), status=201, body="{}")
        assert isinstance(err, SerdeError)
        assert err.status == 201

    def test_json_error_is_serde_error(self):
        try:
            json.loads("{")
        except json.JSONDecodeError as e:
            err = from_exception(e, status=200, body="{")
        assert isinstance(err, SerdeError)
        assert err.body == "{"

    def test_classified_error_passes_through(self):
        err = ServerError("x", 500)
        assert from_exception(err) is err

    def test_unknown_exception_is_rejected(self):
        with pytest.raises(TypeError):
            from_exception(KeyError("x"))
