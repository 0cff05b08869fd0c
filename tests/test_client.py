import logging
from unittest.mock import patch

import pytest
import requests
from urllib3.util import Retry

from discourse_api import __version__
from discourse_api.client import DEFAULT_TIMEOUT, Client
from discourse_api.config import DEFAULT_BASE_URL, Settings
from discourse_api.errors import (
    CommunicationError,
    InvalidRequestError,
    InvalidResponsePayloadError,
    RequestError,
    SerdeError,
    ServerError,
    UnexpectedResponseError,
)
from discourse_api.resources import Topics, Users
from discourse_api.types.backups import CreateBackupRequestBody, CreateBackupResponse, GetBackupsResponse

from tests.helpers import BASE_URL, make_response, sent


class TestClientSetup:
    def test_session_headers(self):
        client = Client("secret-token", BASE_URL)
        headers = client.session.headers
        assert headers["Authorization"] == "Bearer secret-token"
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == f"discourse-api.py/{__version__}"

    def test_defaults(self):
        client = Client("t")
        assert client.base_url == DEFAULT_BASE_URL
        assert client.timeout == DEFAULT_TIMEOUT
        assert client.retry is None

    def test_set_base_url_strips_trailing_slash(self):
        client = Client("t")
        client.set_base_url("https://meta.discourse.org/")
        assert client.base_url == "https://meta.discourse.org"

    def test_repr_hides_token(self):
        assert "secret-token" not in repr(Client("secret-token", BASE_URL))

    def test_int_retry_builds_urllib3_retry(self):
        client = Client("t", retry=3)
        assert isinstance(client.retry, Retry)
        assert client.retry.total == 3
        assert client.session.get_adapter(BASE_URL).max_retries is client.retry

    def test_custom_retry_is_used_as_is(self):
        retry = Retry(total=1)
        assert Client("t", retry=retry).retry is retry

    @pytest.mark.parametrize("retry", [-1, "3", True])
    def test_bad_retry(self, retry):
        with pytest.raises(InvalidRequestError):
            Client("t", retry=retry)

    def test_accessors_share_client(self, client):
        assert isinstance(client.topics(), Topics)
        assert isinstance(client.users(), Users)
        assert client.topics().client is client


class TestClientFromEnv:
    def test_reads_token_and_host(self, monkeypatch):
        monkeypatch.setenv("DISCOURSE_API_TOKEN", "env-token")
        monkeypatch.setenv("DISCOURSE_HOST", "https://meta.discourse.org/")
        client = Client.from_env()
        assert client.token == "env-token"
        assert client.base_url == "https://meta.discourse.org"

    def test_host_defaults(self, monkeypatch):
        monkeypatch.setenv("DISCOURSE_API_TOKEN", "env-token")
        monkeypatch.delenv("DISCOURSE_HOST", raising=False)
        assert Client.from_env().base_url == DEFAULT_BASE_URL

    def test_missing_token(self, monkeypatch):
        monkeypatch.delenv("DISCOURSE_API_TOKEN", raising=False)
        with pytest.raises(InvalidRequestError, match="DISCOURSE_API_TOKEN"):
            Client.from_env()

    def test_from_settings(self):
        settings = Settings(token="t", host="https://meta.discourse.org", timeout=30, retries=2)
        client = Client.from_settings(settings)
        assert client.base_url == "https://meta.discourse.org"
        assert client.timeout == (DEFAULT_TIMEOUT[0], 30)
        assert client.retry.total == 2


class TestClientCall:
    def test_decodes_model(self, client, session):
        session.request.return_value = make_response(200, {"success": "OK"})
        result = client.call("POST", "admin/backups.json", response_model=CreateBackupResponse)
        assert result == CreateBackupResponse(success="OK")

    def test_decodes_list(self, client, session):
        session.request.return_value = make_response(200, [
            {"filename": "a.tar.gz", "size": 1, "last_modified": "2024-01-01"},
            {"filename": "b.tar.gz", "size": 2, "last_modified": "2024-01-02"},
        ])
        result = client.call("GET", "admin/backups.json", response_model=GetBackupsResponse, many=True)
        assert [b.filename for b in result] == ["a.tar.gz", "b.tar.gz"]

    def test_no_response_model_returns_none(self, client, session):
        session.request.return_value = make_response(200, b"")
        assert client.call("PUT", "t/1/bookmark.json") is None

    def test_text(self, client, session):
        session.request.return_value = make_response(200, "BEGIN:VCALENDAR", content_type="text/calendar")
        assert client.call("GET", "discourse-post-event/events.ics", text=True) == "BEGIN:VCALENDAR"

    def test_sends_json_body_without_absent_fields(self, client, session):
        session.request.return_value = make_response(200, {"success": "OK"})
        client.call(
            "POST",
            "admin/backups.json",
            body={"with_uploads": True},
            body_model=CreateBackupRequestBody,
            response_model=CreateBackupResponse,
        )
        method, url, kwargs = sent(session)
        assert method == "POST"
        assert url == f"{BASE_URL}/admin/backups.json"
        assert kwargs["json"] == {"with_uploads": True}
        assert kwargs["timeout"] == DEFAULT_TIMEOUT

    def test_path_params_are_quoted(self, client, session):
        client.call("GET", "u/{username}.json", path_params={"username": "a b/c"})
        _, url, _ = sent(session)
        assert url == f"{BASE_URL}/u/a%20b%2Fc.json"

    def test_empty_path_param_is_rejected_before_sending(self, client, session):
        with pytest.raises(InvalidRequestError, match="username"):
            client.call("GET", "u/{username}.json", path_params={"username": ""})
        session.request.assert_not_called()

    def test_invalid_dict_body_is_rejected_before_sending(self, client, session):
        with pytest.raises(InvalidRequestError):
            client.call("POST", "admin/backups.json", body={"with_uploads": "maybe"}, body_model=CreateBackupRequestBody)
        session.request.assert_not_called()

    def test_wrong_model_body_is_rejected(self, client, session):
        with pytest.raises(InvalidRequestError):
            client.call("POST", "x.json", body=CreateBackupResponse(success="OK"), body_model=CreateBackupRequestBody)
        session.request.assert_not_called()

    def test_query_drops_absent_values(self, client, session):
        client.call("GET", "latest.json", query={"ascending": None, "order": "views", "per_page": 10})
        _, _, kwargs = sent(session)
        assert kwargs["params"] == [("order", "views"), ("per_page", "10")]

    def test_empty_query_is_none(self, client, session):
        client.call("GET", "latest.json", query={"order": None})
        _, _, kwargs = sent(session)
        assert kwargs["params"] is None


class TestClientFailures:
    def test_server_error(self, client, session):
        session.request.return_value = make_response(404, {"errors": ["not found"]})
        with pytest.raises(ServerError) as exc_info:
            client.call("GET", "t/{id}.json", path_params={"id": 1})
        assert exc_info.value.status == 404
        assert "not found" in exc_info.value.body

    def test_redirect_is_unexpected(self, client, session):
        session.request.return_value = make_response(304)
        with pytest.raises(UnexpectedResponseError) as exc_info:
            client.call("GET", "site.json")
        assert exc_info.value.status == 304

    def test_bad_json_is_serde_error(self, client, session):
        session.request.return_value = make_response(200, b"<html>")
        with pytest.raises(SerdeError) as exc_info:
            client.call("GET", "admin/backups.json", response_model=CreateBackupResponse)
        assert exc_info.value.status == 200
        assert exc_info.value.body == "<html>"

    def test_missing_field_is_serde_error(self, client, session):
        session.request.return_value = make_response(201, {})
        with pytest.raises(SerdeError) as exc_info:
            client.call("POST", "admin/backups.json", response_model=CreateBackupResponse)
        assert exc_info.value.status == 201

    def test_transport_error(self, client, session):
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(RequestError) as exc_info:
            client.call("GET", "site.json")
        assert exc_info.value.status is None
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_transport_error_with_retry_is_communication_error(self, session):
        client = Client("t", BASE_URL, retry=2, session=session)
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(CommunicationError):
            client.call("GET", "site.json")

    def test_retry_exhausted(self, client, session):
        session.request.side_effect = requests.exceptions.RetryError("too many 503 responses")
        with pytest.raises(CommunicationError):
            client.call("GET", "site.json")

    def test_unreadable_body(self, client, session):
        resp = make_response(200)
        resp._content = False
        resp.raw = _BrokenRaw()
        session.request.return_value = resp
        with pytest.raises(InvalidResponsePayloadError) as exc_info:
            client.call("GET", "site.json")
        assert exc_info.value.response is resp

    def test_failures_are_logged_without_token(self, client, session, caplog):
        session.request.return_value = make_response(500, "oops")
        with caplog.at_level(logging.WARNING, logger="discourse_api.client"):
            with pytest.raises(ServerError):
                client.call("GET", "site.json")
        assert "Server Error: 500 oops" in caplog.text
        assert "secret-token" not in caplog.text

    def test_debug_log_omits_query_string(self, client, session, caplog):
        session.request.return_value = make_response(
            200, b"", url=f"{BASE_URL}/admin/backups/site.tar.gz?token=download-secret"
        )
        with caplog.at_level(logging.DEBUG, logger="discourse_api.client"):
            client.backups().download("site.tar.gz", "download-secret")
        assert f"GET {BASE_URL}/admin/backups/site.tar.gz -> 200" in caplog.text
        assert "download-secret" not in caplog.text


class _BrokenRaw:
    def stream(self, chunk_size, decode_content=True):
        raise requests.exceptions.ChunkedEncodingError("connection broken")
        yield b""


class TestRequestRaw:
    def test_relative_uri(self, client, session):
        session.request.return_value = make_response(200, {"ok": True})
        resp = client.request_raw("POST", "/posts.json", {"raw": "hello"})
        method, url, kwargs = sent(session)
        assert method == "POST"
        assert url == f"{BASE_URL}/posts.json"
        assert kwargs["data"] == '{"raw": "hello"}'
        assert kwargs["headers"] == {"Content-Type": "application/json"}
        assert resp.json() == {"ok": True}

    def test_absolute_uri_passes_through(self, client, session):
        client.request_raw("GET", "https://cdn.example.com/file.json")
        _, url, kwargs = sent(session)
        assert url == "https://cdn.example.com/file.json"
        assert kwargs["data"] is None

    def test_model_body(self, client, session):
        client.request_raw("POST", "admin/backups.json", CreateBackupRequestBody(with_uploads=False))
        _, _, kwargs = sent(session)
        assert kwargs["data"] == '{"with_uploads":false}'

    def test_error_status_is_returned_untouched(self, client, session):
        session.request.return_value = make_response(500, "oops")
        assert client.request_raw("GET", "site.json").status_code == 500
